"""Config settings – 12-factor env-based configuration."""
from beaver.config.settings.base import Settings
from beaver.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader"]
