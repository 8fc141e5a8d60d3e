"""Config settings – 12-factor env-based configuration."""
from shop_grid.config.settings.base import Settings
from shop_grid.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader"]
