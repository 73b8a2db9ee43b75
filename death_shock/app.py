"""Death trigger → config → request → popup."""

import asyncio
import sys
from pathlib import Path
from typing import Optional, Union

from death_shock.domain.config_loader import ConfigLoader
from death_shock.domain.messages import SHOCKING, config_error_message, render_outcome
from death_shock.domain.models import RequestOutcome, ShockRequest
from death_shock.domain.request_builder import RandomSource, build_request
from death_shock.ports.inbound import TriggerSource
from death_shock.ports.outbound import DispatchPort, PausePort, PopupPort


def _log(msg: str):
    print(msg, file=sys.stderr)


class DeathShockMod:
    """Wires host ports to the shock pipeline. One request per death."""

    def __init__(
        self,
        config_dir: Union[str, Path],
        popup: PopupPort,
        pause: PausePort,
        dispatcher: DispatchPort,
        rng: Optional[RandomSource] = None,
    ):
        self._loader = ConfigLoader(config_dir)
        self._popup = popup
        self._pause = pause
        self._dispatcher = dispatcher
        self._rng = rng

    def install(self, trigger_source: TriggerSource) -> None:
        trigger_source.on_trigger_event(self.on_death)

    def on_death(self) -> Optional[asyncio.Task]:
        """Handle one death. Returns the in-flight request task, if any."""
        self._pause.pause_game()
        self._pause.pause_all_actions()
        self._popup.show(SHOCKING)
        return self.send()

    def send(self) -> Optional[asyncio.Task]:
        result = self._loader.load()
        if not result.success:
            self._popup.show(config_error_message(result.error))
            return None

        request = build_request(result.config, self._rng)
        task = self._dispatcher.dispatch(request, self._make_listener(request))
        self._popup.show(request.summary())
        return task

    def _make_listener(self, request: ShockRequest):
        def on_outcome(outcome: RequestOutcome) -> None:
            message = render_outcome(outcome)
            if message is None:
                return
            _log(f"[{request.url}] {message}")
            self._popup.show(message)

        return on_outcome
