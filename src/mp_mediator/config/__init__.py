"""Config – environment-driven settings."""

from mp_mediator.config.settings import EnvSettingsLoader, MediatorSettings, Settings, SettingsLoader
from mp_mediator.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MediatorSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
