"""Config – environment-driven settings and their errors."""

from causal_option.config.settings import EnvSettingsLoader, Settings, SettingsLoader
from causal_option.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
