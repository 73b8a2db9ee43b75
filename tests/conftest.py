"""Shared fixtures."""

import json

import pytest

_VALID_SETTINGS = {
    "shockerID": "x",
    "OpenShockToken": "y",
    "customName": "z",
    "minDuration": 500,
    "maxDuration": 10000,
    "minIntensity": 10,
    "maxIntensity": 90,
}


@pytest.fixture
def write_settings(tmp_path):
    """Write settings.json into tmp_path. Accepts a dict or raw text."""

    def _write(content):
        text = content if isinstance(content, str) else json.dumps(content)
        (tmp_path / "settings.json").write_text(text, encoding="utf-8")
        return tmp_path

    return _write


@pytest.fixture
def valid_settings():
    return dict(_VALID_SETTINGS)
