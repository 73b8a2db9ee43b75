"""Console stand-ins for the game host."""

import sys
from typing import List

from death_shock.ports.inbound import TriggerHandler


def _log(msg: str):
    print(msg, file=sys.stderr)


class ConsolePopup:
    """Prints popups to stdout instead of drawing an alert layer."""

    def __init__(self, title: str = "Message"):
        self.title = title
        self.shown: List[str] = []

    def show(self, message: str) -> None:
        self.shown.append(message)
        print(f"[{self.title}] {message}")


class ConsolePause:
    def __init__(self):
        self.paused = False
        self.actions_paused = False

    def pause_game(self) -> None:
        self.paused = True
        _log("Game paused")

    def pause_all_actions(self) -> None:
        self.actions_paused = True
        _log("All running actions paused")


class ManualTrigger:
    """Trigger source fired by calling fire()."""

    def __init__(self):
        self._handlers: List[TriggerHandler] = []

    def on_trigger_event(self, handler: TriggerHandler) -> None:
        self._handlers.append(handler)

    def fire(self) -> list:
        return [handler() for handler in self._handlers]
