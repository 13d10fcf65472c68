"""Configuration – dataclass settings loaded from the environment."""
from profile_es.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    ProfileSettings,
    Settings,
    SettingsLoader,
)
from profile_es.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "ProfileSettings",
    "Settings",
    "SettingsLoader",
]
