"""Config – 12-factor settings and loaders."""

from shop_grid.config.grid import GridSettings
from shop_grid.config.settings import DotenvSettingsLoader, EnvSettingsLoader, Settings, SettingsLoader
from shop_grid.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "GridSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
