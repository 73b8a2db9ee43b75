"""Port interfaces (Hexagonal Architecture)."""

from death_shock.ports.inbound import TriggerHandler, TriggerSource
from death_shock.ports.outbound import DispatchPort, OutcomeListener, PausePort, PopupPort

__all__ = [
    "TriggerHandler",
    "TriggerSource",
    "DispatchPort",
    "OutcomeListener",
    "PausePort",
    "PopupPort",
]
