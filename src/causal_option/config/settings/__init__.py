"""Config settings – environment-based configuration."""
from causal_option.config.settings.base import Settings
from causal_option.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "Settings", "SettingsLoader"]
