"""Application settings models."""

import os

from pydantic import BaseModel, ConfigDict, Field, field_validator

from kubesnap.constants.defaults import (
    AUTO_REFRESH_DEFAULT,
    LOG_LEVEL_DEFAULT,
    NAMESPACE_DEFAULT,
    REFRESH_INTERVAL_DEFAULT,
)
from kubesnap.constants.enums import RefreshInterval
from kubesnap.constants.timeouts import HTTP_REQUEST_TIMEOUT_SECONDS


class ClusterSettings(BaseModel):
    """Startup configuration for one monitored cluster."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    api_endpoint: str = ""
    namespace: str = NAMESPACE_DEFAULT
    token: str = Field(default="", repr=False)
    token_env: str = ""  # environment variable holding the bearer token
    auto_refresh: bool = AUTO_REFRESH_DEFAULT
    refresh_interval_ms: int = REFRESH_INTERVAL_DEFAULT.value
    verify_tls: bool = True

    @field_validator("refresh_interval_ms")
    @classmethod
    def _check_interval(cls, value: int) -> int:
        RefreshInterval(value)
        return value

    @field_validator("api_endpoint")
    @classmethod
    def _strip_endpoint(cls, value: str) -> str:
        return value.strip().rstrip("/")

    def resolve_token(self) -> str:
        """Return the inline token, falling back to ``token_env``."""
        if self.token:
            return self.token
        if self.token_env:
            return os.environ.get(self.token_env, "")
        return ""


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True)

    clusters: list[ClusterSettings] = []
    request_timeout_seconds: float = HTTP_REQUEST_TIMEOUT_SECONDS
    log_level: str = LOG_LEVEL_DEFAULT

    @field_validator("request_timeout_seconds")
    @classmethod
    def _check_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("request_timeout_seconds must be positive")
        return value


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


class ConfigSaveError(ConfigError):
    """Raised when settings fail to save."""
