"""Config – 12-factor settings and loaders."""

from listquery.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    ListQuerySettings,
    Settings,
)
from listquery.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "ListQuerySettings",
    "MissingRequiredSettingError",
    "Settings",
]
