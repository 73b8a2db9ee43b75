"""User-facing popup text."""

from typing import Optional

from death_shock.domain.models import (
    Cancelled,
    ConfigError,
    Progress,
    RequestOutcome,
    Success,
    TransportError,
)

SHOCKING = "Shocking..."
NO_RESPONSE = "No response from the server"
CANCELLED = "Request was cancelled."

_READ_README = "Read readme.txt in the mod's config folder."

CONFIG_ERROR_MESSAGES = {
    ConfigError.MISSING: f"Error: Missing config file! {_READ_README}",
    ConfigError.MALFORMED: f"Error: Invalid config file! {_READ_README}",
    ConfigError.INVALID_RANGE: f"Error: Invalid config file! {_READ_README}",
    ConfigError.MISSING_FIELDS: f"Error: Missing required fields in config file! {_READ_README}",
}


def config_error_message(error: ConfigError) -> str:
    return CONFIG_ERROR_MESSAGES[error]


def render_outcome(outcome: RequestOutcome) -> Optional[str]:
    """Popup text for an outcome, or None when nothing should be shown."""
    if isinstance(outcome, Success):
        return outcome.body or NO_RESPONSE
    if isinstance(outcome, Cancelled):
        return CANCELLED
    if isinstance(outcome, TransportError):
        return f"Request failed: {outcome.message}"
    if isinstance(outcome, Progress):
        return None
    raise TypeError(f"Unknown outcome: {outcome!r}")
