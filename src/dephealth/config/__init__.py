"""Config – 12-factor settings and loaders."""

from dephealth.config.base import Settings
from dephealth.config.health import HealthSettings
from dephealth.config.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "HealthSettings",
    "Settings",
    "SettingsLoader",
]
