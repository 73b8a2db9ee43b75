"""Death Shock — OpenShock control request on every in-game death."""

from death_shock.config import __version__, AppConfig
from death_shock.docs import write_docs
from death_shock.domain import (
    Cancelled,
    ConfigError,
    ConfigLoader,
    LoadResult,
    Progress,
    ShockConfig,
    ShockRequest,
    Success,
    TransportError,
    build_request,
    render_outcome,
)
from death_shock.adapters.http import OpenShockClient
from death_shock.app import DeathShockMod

__all__ = [
    "__version__",
    "AppConfig",
    "Cancelled",
    "ConfigError",
    "ConfigLoader",
    "DeathShockMod",
    "LoadResult",
    "OpenShockClient",
    "Progress",
    "ShockConfig",
    "ShockRequest",
    "Success",
    "TransportError",
    "build_request",
    "render_outcome",
    "write_docs",
]
