"""Config settings – 12-factor env-based configuration."""
from catalog_filters.config.settings.base import Settings
from catalog_filters.config.settings.filters import ErrorPolicy, FiltersSettings
from catalog_filters.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "ErrorPolicy", "FiltersSettings", "Settings", "SettingsLoader"]
