"""Domain data models — pure Python dataclasses."""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Union


class ConfigError(Enum):
    MISSING = "missing"
    MALFORMED = "malformed"
    INVALID_RANGE = "invalid_range"
    MISSING_FIELDS = "missing_fields"


@dataclass(frozen=True)
class ShockConfig:
    """Validated contents of settings.json."""

    shocker_id: str
    api_token: str
    custom_name: str
    min_duration: int
    max_duration: int
    min_intensity: int
    max_intensity: int
    endpoint_domain: str


@dataclass
class LoadResult:
    """Outcome of reading settings.json."""

    success: bool
    config: Optional[ShockConfig] = None
    error: Optional[ConfigError] = None
    detail: Optional[str] = None


@dataclass(frozen=True)
class ShockRequest:
    """A single control request, ready to be sent."""

    url: str
    headers: Dict[str, str]
    shocker_id: str
    custom_name: str
    intensity: int
    duration_ms: int

    def body(self) -> dict:
        return {
            "shocks": [
                {
                    "id": self.shocker_id,
                    "type": "Shock",
                    "intensity": self.intensity,
                    "duration": self.duration_ms,
                    "exclusive": True,
                }
            ],
            "customName": self.custom_name,
        }

    def body_json(self) -> str:
        return json.dumps(self.body())

    def summary(self) -> str:
        return f"Duration: {self.duration_ms // 1000}s     Intensity: {self.intensity}"


# ── Request outcomes ──────────────────────────────────────


@dataclass(frozen=True)
class Success:
    body: str


@dataclass(frozen=True)
class Progress:
    percent: float


@dataclass(frozen=True)
class Cancelled:
    pass


@dataclass(frozen=True)
class TransportError:
    """No HTTP response was received at all."""

    message: str


RequestOutcome = Union[Success, Progress, Cancelled, TransportError]

TERMINAL_OUTCOMES = (Success, Cancelled, TransportError)


def is_terminal(outcome: RequestOutcome) -> bool:
    return isinstance(outcome, TERMINAL_OUTCOMES)
