"""Configuration and fixed constants."""

__version__ = "0.1.0"

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

SETTINGS_FILENAME = "settings.json"
README_FILENAME = "readme.txt"

DEFAULT_ENDPOINT_DOMAIN = "api.openshock.app"
CONTROL_PATH = "/2/shockers/control"

# Inclusive bounds enforced on settings.json
MIN_DURATION_MS = 300
MAX_DURATION_MS = 30000
MIN_INTENSITY = 1
MAX_INTENSITY = 100


def default_config_dir() -> Path:
    """Per-user mod config directory, chosen by platform."""
    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "death-shock"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "death-shock"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "death-shock"
    return Path.home() / ".config" / "death-shock"


@dataclass
class AppConfig:
    """Runtime settings for the mod host."""

    config_dir: Path

    @property
    def settings_path(self) -> Path:
        return self.config_dir / SETTINGS_FILENAME

    @property
    def readme_path(self) -> Path:
        return self.config_dir / README_FILENAME

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create AppConfig from environment variables."""
        raw = os.getenv("DEATH_SHOCK_CONFIG_DIR", "").strip()
        return cls(config_dir=Path(raw).expanduser() if raw else default_config_dir())
