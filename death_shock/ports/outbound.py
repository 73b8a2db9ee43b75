"""Outbound ports — host capabilities and the HTTP transport."""

import asyncio
from typing import Callable, Protocol, runtime_checkable

from death_shock.domain.models import RequestOutcome, ShockRequest

OutcomeListener = Callable[[RequestOutcome], None]


@runtime_checkable
class PopupPort(Protocol):
    """In-game alert popup."""

    def show(self, message: str) -> None: ...


@runtime_checkable
class PausePort(Protocol):
    """Game pause control."""

    def pause_game(self) -> None: ...
    def pause_all_actions(self) -> None: ...


@runtime_checkable
class DispatchPort(Protocol):
    """Fire-and-forget request submission."""

    def dispatch(self, request: ShockRequest, on_outcome: OutcomeListener) -> asyncio.Task: ...
