"""settings.json loading and validation.

Every failure is reported through LoadResult; nothing here raises.
"""

import json
import sys
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

from death_shock.config import (
    DEFAULT_ENDPOINT_DOMAIN,
    MAX_DURATION_MS,
    MAX_INTENSITY,
    MIN_DURATION_MS,
    MIN_INTENSITY,
    SETTINGS_FILENAME,
)
from death_shock.docs import write_docs
from death_shock.domain.models import ConfigError, LoadResult, ShockConfig


def _log(msg: str):
    print(msg, file=sys.stderr)


_REQUIRED_FIELDS = ("shockerID", "OpenShockToken", "customName")

_NUMERIC_DEFAULTS = {
    "minDuration": MIN_DURATION_MS,
    "maxDuration": MAX_DURATION_MS,
    "minIntensity": MIN_INTENSITY,
    "maxIntensity": MAX_INTENSITY,
}


def _fail(error: ConfigError, detail: str) -> LoadResult:
    _log(detail)
    return LoadResult(success=False, error=error, detail=detail)


class ConfigLoader:
    """Reads settings.json from a mod config directory."""

    def __init__(
        self,
        config_dir: Union[str, Path],
        doc_writer: Callable[[Path], Any] = write_docs,
    ):
        self._config_dir = Path(config_dir)
        self._doc_writer = doc_writer

    @property
    def settings_path(self) -> Path:
        return self._config_dir / SETTINGS_FILENAME

    def load(self) -> LoadResult:
        self._doc_writer(self._config_dir)

        raw = self._read_raw()
        if isinstance(raw, LoadResult):
            return raw

        numbers = self._read_numbers(raw)
        if isinstance(numbers, LoadResult):
            return numbers

        min_duration = numbers["minDuration"]
        max_duration = numbers["maxDuration"]
        min_intensity = numbers["minIntensity"]
        max_intensity = numbers["maxIntensity"]

        if (
            min_duration < MIN_DURATION_MS
            or max_duration > MAX_DURATION_MS
            or min_duration > max_duration
        ):
            return _fail(
                ConfigError.INVALID_RANGE,
                f"Invalid duration range in config: minDuration={min_duration}, "
                f"maxDuration={max_duration}",
            )

        if (
            min_intensity < MIN_INTENSITY
            or max_intensity > MAX_INTENSITY
            or min_intensity > max_intensity
        ):
            return _fail(
                ConfigError.INVALID_RANGE,
                f"Invalid intensity range in config: minIntensity={min_intensity}, "
                f"maxIntensity={max_intensity}",
            )

        missing = [name for name in _REQUIRED_FIELDS if not _non_empty_str(raw.get(name))]
        if missing:
            return _fail(
                ConfigError.MISSING_FIELDS,
                f"Missing required fields in JSON configuration: {', '.join(missing)}",
            )

        endpoint = raw.get("endpointDomain")
        if not isinstance(endpoint, str) or not endpoint.strip():
            endpoint = DEFAULT_ENDPOINT_DOMAIN

        return LoadResult(
            success=True,
            config=ShockConfig(
                shocker_id=raw["shockerID"],
                api_token=raw["OpenShockToken"],
                custom_name=raw["customName"],
                min_duration=min_duration,
                max_duration=max_duration,
                min_intensity=min_intensity,
                max_intensity=max_intensity,
                endpoint_domain=endpoint.strip(),
            ),
        )

    def _read_raw(self) -> Union[Dict[str, Any], LoadResult]:
        path = self.settings_path
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            return _fail(ConfigError.MALFORMED, f"Error reading {SETTINGS_FILENAME} as UTF-8: {e}")
        except OSError as e:
            return _fail(ConfigError.MISSING, f"Failed to open {SETTINGS_FILENAME} at {path}: {e}")

        try:
            raw = json.loads(text)
        except (ValueError, RecursionError) as e:
            return _fail(ConfigError.MALFORMED, f"Error parsing JSON file: {e}")

        if not isinstance(raw, dict):
            return _fail(
                ConfigError.MALFORMED,
                f"Error parsing JSON file: expected an object, got {type(raw).__name__}",
            )
        return raw

    @staticmethod
    def _read_numbers(raw: Dict[str, Any]) -> Union[Dict[str, int], LoadResult]:
        numbers: Dict[str, int] = {}
        for name, default in _NUMERIC_DEFAULTS.items():
            value = raw.get(name, default)
            # bool is an int subclass; reject it along with floats and strings
            if isinstance(value, bool) or not isinstance(value, int):
                return _fail(
                    ConfigError.MALFORMED,
                    f"Error parsing JSON file: {name} must be an integer, got {value!r}",
                )
            numbers[name] = value
        return numbers


def _non_empty_str(value: Optional[Any]) -> bool:
    return isinstance(value, str) and value != ""
