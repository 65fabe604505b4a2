"""Config settings – 12-factor env-based configuration."""
from listquery.config.settings.base import Settings
from listquery.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader
from listquery.config.settings.query import ListQuerySettings

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "ListQuerySettings",
    "Settings",
]
