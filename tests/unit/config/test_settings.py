"""Unit tests for config settings & loaders."""

from dataclasses import dataclass
from typing import ClassVar

import pytest

from dephealth.config import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    HealthSettings,
    Settings,
)
from dephealth.errors import ConfigError, InvalidSettingValueError, MissingRequiredSettingError


@dataclass
class _RequiredSettings(Settings):
    _prefix: ClassVar[str] = "REQ"

    endpoint: str


class TestEnvSettingsLoader:
    def test_defaults(self) -> None:
        settings = EnvSettingsLoader().load(HealthSettings)
        assert settings == HealthSettings()
        assert settings.timeout_seconds == 5.0
        assert settings.degraded_after is None

    def test_loads_strings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HEALTH_SENTRY_URL", "https://sentry.example.com/api/1/store/")
        monkeypatch.setenv("HEALTH_REDIS_URL", "redis://cache:6379/2")
        settings = EnvSettingsLoader().load(HealthSettings)
        assert settings.sentry_url == "https://sentry.example.com/api/1/store/"
        assert settings.redis_url == "redis://cache:6379/2"

    def test_loads_bool_false(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for falsy in ("false", "False", "0", "no", "off"):
            monkeypatch.setenv("HEALTH_JAEGER_ENABLED", falsy)
            assert EnvSettingsLoader().load(HealthSettings).jaeger_enabled is False

    def test_loads_bool_true(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for truthy in ("true", "True", "1", "yes", "on"):
            monkeypatch.setenv("HEALTH_JAEGER_ENABLED", truthy)
            assert EnvSettingsLoader().load(HealthSettings).jaeger_enabled is True

    def test_loads_float(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HEALTH_TIMEOUT_SECONDS", "1.5")
        monkeypatch.setenv("HEALTH_DEGRADED_AFTER_SECONDS", "0.25")
        settings = EnvSettingsLoader().load(HealthSettings)
        assert settings.timeout_seconds == 1.5
        assert settings.degraded_after == 0.25

    def test_unparsable_float(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HEALTH_TIMEOUT_SECONDS", "soon")
        with pytest.raises(ConfigError, match="HEALTH_TIMEOUT_SECONDS"):
            EnvSettingsLoader().load(HealthSettings)

    def test_invalid_timeout(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HEALTH_TIMEOUT_SECONDS", "0")
        with pytest.raises(InvalidSettingValueError) as info:
            EnvSettingsLoader().load(HealthSettings)
        assert info.value.setting_name == "timeout_seconds"

    def test_missing_required(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("REQ_ENDPOINT", raising=False)
        with pytest.raises(MissingRequiredSettingError) as info:
            EnvSettingsLoader().load(_RequiredSettings)
        assert info.value.setting_name == "REQ_ENDPOINT"


class TestHealthSettingsValidation:
    def test_negative_degraded_threshold(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            HealthSettings(degraded_after_seconds=-1)

    def test_config_error_is_raised_not_swallowed(self) -> None:
        with pytest.raises(ConfigError):
            HealthSettings(timeout_seconds=-2)


class TestDotenvSettingsLoader:
    def test_reads_env_file(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        # register the keys with monkeypatch so teardown removes what load_dotenv sets
        for key in ("HEALTH_INFLUX_ENABLED", "HEALTH_INFLUX_URL"):
            monkeypatch.setenv(key, "placeholder")
            monkeypatch.delenv(key)
        env_file = tmp_path / ".env"
        env_file.write_text("HEALTH_INFLUX_ENABLED=false\nHEALTH_INFLUX_URL=http://influx:8086\n")

        settings = DotenvSettingsLoader(str(env_file)).load(HealthSettings)

        assert settings.influx_enabled is False
        assert settings.influx_url == "http://influx:8086"

    def test_environment_wins_without_override(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HEALTH_REDIS_URL", "redis://from-env:6379/0")
        env_file = tmp_path / ".env"
        env_file.write_text("HEALTH_REDIS_URL=redis://from-file:6379/0\n")

        settings = DotenvSettingsLoader(str(env_file)).load(HealthSettings)

        assert settings.redis_url == "redis://from-env:6379/0"


class TestConfigErrorPayload:
    def test_invalid_value_detail(self) -> None:
        with pytest.raises(InvalidSettingValueError) as info:
            HealthSettings(timeout_seconds=0)
        assert info.value.to_dict() == {
            "error": "timeout_seconds=0 must be positive",
            "error_type": "InvalidSettingValueError",
            "code": "invalid_setting",
            "detail": {"setting": "timeout_seconds", "value": 0, "reason": "must be positive"},
        }

    def test_missing_setting_detail(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("REQ_ENDPOINT", raising=False)
        with pytest.raises(MissingRequiredSettingError) as info:
            EnvSettingsLoader().load(_RequiredSettings)
        assert info.value.code == "missing_setting"
        assert info.value.detail == {"env_key": "REQ_ENDPOINT"}

    def test_unparsable_value_keeps_cause(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HEALTH_DEGRADED_AFTER_SECONDS", "fast")
        with pytest.raises(ConfigError) as info:
            EnvSettingsLoader().load(HealthSettings)
        payload = info.value.to_dict()
        assert payload["detail"] == {"env_key": "HEALTH_DEGRADED_AFTER_SECONDS"}
        assert payload["cause"].startswith("ValueError(")
        assert isinstance(info.value.__cause__, ValueError)

    def test_env_key_uses_prefix(self) -> None:
        assert HealthSettings.env_key("redis_url") == "HEALTH_REDIS_URL"
        assert _RequiredSettings.env_key("endpoint") == "REQ_ENDPOINT"
