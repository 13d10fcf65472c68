"""Config settings – 12-factor env-based configuration."""
from profile_es.config.settings.base import ProfileSettings, Settings
from profile_es.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "ProfileSettings", "Settings", "SettingsLoader"]
