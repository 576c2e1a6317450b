"""Settings state models."""

from kubesnap.models.state.app_settings import (
    AppSettings,
    ClusterSettings,
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
)
from kubesnap.models.state.config_manager import ConfigManager

__all__ = [
    "AppSettings",
    "ClusterSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
]
