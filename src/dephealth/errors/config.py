"""Errors raised while loading ``HEALTH_*`` settings.

Unlike check failures these do propagate: a component cannot be built from
settings that failed to load.
"""
from __future__ import annotations

from dephealth.errors.base import BaseError


class ConfigError(BaseError):
    """Settings could not be read or parsed."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    default_code = "missing_setting"

    def __init__(self, env_key: str) -> None:
        super().__init__(f"environment variable {env_key} is required", detail={"env_key": env_key})
        self.setting_name = env_key


class InvalidSettingValueError(ConfigError):
    """A setting parsed but its value is out of range."""

    default_code = "invalid_setting"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"{setting_name}={value!r} {reason}",
            detail={"setting": setting_name, "value": value, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
