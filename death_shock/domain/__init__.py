"""Domain layer — pure Python, no framework dependencies."""

from death_shock.domain.models import (
    Cancelled,
    ConfigError,
    LoadResult,
    Progress,
    RequestOutcome,
    ShockConfig,
    ShockRequest,
    Success,
    TransportError,
    is_terminal,
)
from death_shock.domain.config_loader import ConfigLoader
from death_shock.domain.request_builder import RandomSource, build_request
from death_shock.domain.messages import config_error_message, render_outcome

__all__ = [
    "Cancelled",
    "ConfigError",
    "ConfigLoader",
    "LoadResult",
    "Progress",
    "RandomSource",
    "RequestOutcome",
    "ShockConfig",
    "ShockRequest",
    "Success",
    "TransportError",
    "build_request",
    "config_error_message",
    "is_terminal",
    "render_outcome",
]
