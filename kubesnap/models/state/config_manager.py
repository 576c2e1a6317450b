"""YAML persistence for application settings."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from kubesnap.models.state.app_settings import (
    AppSettings,
    ClusterSettings,
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
)

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "KUBESNAP_CONFIG"
DEFAULT_CONFIG_PATH = Path("~/.config/kubesnap/settings.yaml")


class ConfigManager:
    """Loads and saves :class:`AppSettings` as YAML."""

    @staticmethod
    def config_path(path: Path | str | None = None) -> Path:
        """Resolve the settings file location.

        Explicit path first, then ``KUBESNAP_CONFIG``, then the per-user default.
        """
        if path:
            return Path(path).expanduser()
        env_path = os.environ.get(CONFIG_PATH_ENV, "").strip()
        if env_path:
            return Path(env_path).expanduser()
        return DEFAULT_CONFIG_PATH.expanduser()

    @classmethod
    def load(cls, path: Path | str | None = None) -> AppSettings:
        """Load settings, returning defaults when the file does not exist."""
        config_file = cls.config_path(path)
        if not config_file.exists():
            logger.debug("No settings file at %s, using defaults", config_file)
            return AppSettings()

        try:
            raw = yaml.safe_load(config_file.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as e:
            raise ConfigLoadError(f"Unable to read settings from {config_file}: {e}") from e

        if raw is None:
            return AppSettings()
        if not isinstance(raw, dict):
            raise ConfigLoadError(
                f"Settings file {config_file} must contain a mapping, got {type(raw).__name__}"
            )

        try:
            settings = AppSettings.model_validate(raw)
        except ValidationError as e:
            raise ConfigLoadError(f"Invalid settings in {config_file}: {e}") from e

        logger.info("Loaded %d cluster definition(s) from %s", len(settings.clusters), config_file)
        return settings

    @classmethod
    def save(cls, settings: AppSettings, path: Path | str | None = None) -> Path:
        """Write settings to disk without inline tokens."""
        config_file = cls.config_path(path)
        payload = cls._to_document(settings)
        try:
            config_file.parent.mkdir(parents=True, exist_ok=True)
            config_file.write_text(
                yaml.safe_dump(payload, sort_keys=False, default_flow_style=False),
                encoding="utf-8",
            )
        except OSError as e:
            raise ConfigSaveError(f"Unable to write settings to {config_file}: {e}") from e
        return config_file

    @staticmethod
    def _to_document(settings: AppSettings) -> dict[str, Any]:
        document = settings.model_dump(mode="json")
        document["clusters"] = [
            cluster.model_dump(mode="json", exclude={"token"})
            for cluster in settings.clusters
        ]
        return document


__all__ = [
    "CONFIG_PATH_ENV",
    "DEFAULT_CONFIG_PATH",
    "AppSettings",
    "ClusterSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
]
