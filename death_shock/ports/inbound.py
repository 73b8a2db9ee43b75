"""Inbound port — how the host tells us a death happened."""

from typing import Callable, Protocol, runtime_checkable

TriggerHandler = Callable[[], None]


@runtime_checkable
class TriggerSource(Protocol):
    """Host event hook (e.g. the player's death animation)."""

    def on_trigger_event(self, handler: TriggerHandler) -> None: ...
