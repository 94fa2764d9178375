"""Config settings – environment-based configuration."""
from askbus.config.settings.base import Settings
from askbus.config.settings.bus import QueryBusSettings
from askbus.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "QueryBusSettings", "Settings", "SettingsLoader"]
