"""Tests for settings.json loading and validation."""

import json

import pytest

from death_shock.domain.config_loader import ConfigLoader
from death_shock.domain.models import ConfigError, ShockConfig


def _settings(base, **overrides):
    data = dict(base)
    for key, value in overrides.items():
        if value is None:
            data.pop(key, None)
        else:
            data[key] = value
    return data


class TestLoadSuccess:
    def test_scenario_config(self, write_settings, valid_settings):
        result = ConfigLoader(write_settings(valid_settings)).load()
        assert result.success is True
        assert result.error is None
        assert result.config == ShockConfig(
            shocker_id="x",
            api_token="y",
            custom_name="z",
            min_duration=500,
            max_duration=10000,
            min_intensity=10,
            max_intensity=90,
            endpoint_domain="api.openshock.app",
        )

    def test_defaults_applied(self, write_settings):
        config_dir = write_settings({"shockerID": "s", "OpenShockToken": "t", "customName": "c"})
        cfg = ConfigLoader(config_dir).load().config
        assert cfg.min_duration == 300
        assert cfg.max_duration == 30000
        assert cfg.min_intensity == 1
        assert cfg.max_intensity == 100
        assert cfg.endpoint_domain == "api.openshock.app"

    def test_boundaries_are_inclusive(self, write_settings, valid_settings):
        config_dir = write_settings(
            _settings(
                valid_settings, minDuration=300, maxDuration=300, minIntensity=100, maxIntensity=100
            )
        )
        result = ConfigLoader(config_dir).load()
        assert result.success is True
        assert result.config.min_duration == result.config.max_duration == 300

    def test_custom_endpoint(self, write_settings, valid_settings):
        config_dir = write_settings(_settings(valid_settings, endpointDomain="api.customdomain.com"))
        cfg = ConfigLoader(config_dir).load().config
        assert cfg.endpoint_domain == "api.customdomain.com"

    @pytest.mark.parametrize("endpoint", ["", "   ", None])
    def test_empty_endpoint_falls_back(self, write_settings, valid_settings, endpoint):
        config_dir = write_settings(_settings(valid_settings, endpointDomain=endpoint))
        cfg = ConfigLoader(config_dir).load().config
        assert cfg.endpoint_domain == "api.openshock.app"

    def test_unknown_keys_ignored(self, write_settings, valid_settings):
        config_dir = write_settings(_settings(valid_settings, extra="whatever"))
        assert ConfigLoader(config_dir).load().success is True

    def test_config_is_immutable(self, write_settings, valid_settings):
        cfg = ConfigLoader(write_settings(valid_settings)).load().config
        with pytest.raises(AttributeError):
            cfg.max_intensity = 101


class TestLoadMissing:
    def test_missing_file(self, tmp_path):
        result = ConfigLoader(tmp_path).load()
        assert result.success is False
        assert result.error is ConfigError.MISSING
        assert result.config is None

    def test_readme_written_even_when_missing(self, tmp_path):
        ConfigLoader(tmp_path).load()
        assert (tmp_path / "readme.txt").exists()

    def test_missing_directory(self, tmp_path):
        config_dir = tmp_path / "not-there"
        result = ConfigLoader(config_dir).load()
        assert result.error is ConfigError.MISSING
        assert (config_dir / "readme.txt").exists()

    def test_doc_writer_called_first(self, tmp_path):
        calls = []
        ConfigLoader(tmp_path, doc_writer=calls.append).load()
        assert calls == [tmp_path]


class TestReadmeWriteFailure:
    """readme.txt is a directory here, so write_docs fails on every load."""

    def test_valid_config_still_loads(self, write_settings, valid_settings, capsys):
        config_dir = write_settings(valid_settings)
        (config_dir / "readme.txt").mkdir()
        result = ConfigLoader(config_dir).load()
        assert result.success is True
        assert result.config.shocker_id == "x"
        assert "Failed to create readme.txt" in capsys.readouterr().err

    def test_missing_config_still_reported(self, tmp_path, capsys):
        (tmp_path / "readme.txt").mkdir()
        result = ConfigLoader(tmp_path).load()
        assert result.error is ConfigError.MISSING
        assert "Failed to create readme.txt" in capsys.readouterr().err


class TestLoadMalformed:
    @pytest.mark.parametrize("text", ["{not json", "", "[1, 2, 3]", '"just a string"', "null"])
    def test_bad_content(self, write_settings, text):
        result = ConfigLoader(write_settings(text)).load()
        assert result.success is False
        assert result.error is ConfigError.MALFORMED

    @pytest.mark.parametrize("value", ["500", 1.5, True, "abc"])
    def test_non_integer_numbers(self, write_settings, valid_settings, value):
        result = ConfigLoader(write_settings(_settings(valid_settings, minDuration=value))).load()
        assert result.error is ConfigError.MALFORMED

    def test_logs_parse_error(self, write_settings, capsys):
        ConfigLoader(write_settings("{oops")).load()
        assert "Error parsing JSON file" in capsys.readouterr().err

    def test_not_utf8(self, tmp_path):
        (tmp_path / "settings.json").write_bytes(b'{"shockerID": "\xff\xfe"}')
        result = ConfigLoader(tmp_path).load()
        assert result.success is False
        assert result.error is ConfigError.MALFORMED

    def test_cp1252_file(self, tmp_path, valid_settings):
        valid_settings["customName"] = "café"
        text = json.dumps(valid_settings, ensure_ascii=False)
        (tmp_path / "settings.json").write_bytes(text.encode("cp1252"))
        assert ConfigLoader(tmp_path).load().error is ConfigError.MALFORMED

    def test_too_deeply_nested(self, write_settings):
        result = ConfigLoader(write_settings("[" * 200000 + "]" * 200000)).load()
        assert result.success is False
        assert result.error is ConfigError.MALFORMED


class TestLoadInvalidRange:
    @pytest.mark.parametrize(
        "overrides",
        [
            {"minDuration": 299},
            {"maxDuration": 30001},
            {"minDuration": 5000, "maxDuration": 4999},
            {"minDuration": 0},
            {"minDuration": -1},
        ],
    )
    def test_duration(self, write_settings, valid_settings, overrides):
        result = ConfigLoader(write_settings(_settings(valid_settings, **overrides))).load()
        assert result.success is False
        assert result.error is ConfigError.INVALID_RANGE

    @pytest.mark.parametrize(
        "overrides",
        [
            {"minIntensity": 0},
            {"maxIntensity": 101},
            {"minIntensity": 50, "maxIntensity": 49},
        ],
    )
    def test_intensity(self, write_settings, valid_settings, overrides):
        result = ConfigLoader(write_settings(_settings(valid_settings, **overrides))).load()
        assert result.error is ConfigError.INVALID_RANGE

    def test_min_above_default_max(self, write_settings, valid_settings):
        # maxDuration defaults to 30000, so a lone minDuration above it is invalid
        data = _settings(valid_settings, minDuration=30001, maxDuration=None)
        result = ConfigLoader(write_settings(data)).load()
        assert result.error is ConfigError.INVALID_RANGE

    def test_logs_offending_values(self, write_settings, valid_settings, capsys):
        data = _settings(valid_settings, minIntensity=0, maxIntensity=101)
        ConfigLoader(write_settings(data)).load()
        err = capsys.readouterr().err
        assert "minIntensity=0" in err
        assert "maxIntensity=101" in err

    def test_range_checked_before_required_fields(self, write_settings, valid_settings):
        data = _settings(valid_settings, maxDuration=99999, shockerID=None)
        result = ConfigLoader(write_settings(data)).load()
        assert result.error is ConfigError.INVALID_RANGE


class TestLoadMissingFields:
    @pytest.mark.parametrize("field", ["shockerID", "OpenShockToken", "customName"])
    def test_absent(self, write_settings, valid_settings, field):
        result = ConfigLoader(write_settings(_settings(valid_settings, **{field: None}))).load()
        assert result.success is False
        assert result.error is ConfigError.MISSING_FIELDS
        assert field in result.detail

    @pytest.mark.parametrize("field", ["shockerID", "OpenShockToken", "customName"])
    def test_empty(self, write_settings, valid_settings, field):
        result = ConfigLoader(write_settings(_settings(valid_settings, **{field: ""}))).load()
        assert result.error is ConfigError.MISSING_FIELDS

    def test_non_string(self, write_settings, valid_settings):
        result = ConfigLoader(write_settings(_settings(valid_settings, shockerID=123))).load()
        assert result.error is ConfigError.MISSING_FIELDS
