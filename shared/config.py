"""
Shared configuration management for the policy store adapter.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError

DEFAULT_DB_NAME = "casbin"
DEFAULT_COLLECTION_NAME = "casbin_rule"


class BaseConfig(BaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_prefix="POLICY_STORE_",
        env_file=".env",
        case_sensitive=False,
        extra="allow"
    )

    # Environment
    env: str = Field(default="local")
    log_level: str = Field(default="info")


class AdapterSettings(BaseConfig):
    """MongoDB connection settings for the policy adapter."""

    mongo_uri: str = Field(default="mongodb://localhost:27017")
    db_name: str = Field(default=DEFAULT_DB_NAME)
    collection_name: str = Field(default=DEFAULT_COLLECTION_NAME)
    server_selection_timeout_ms: int = Field(default=5000)

    @field_validator("server_selection_timeout_ms")
    @classmethod
    def _positive_timeout(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("server_selection_timeout_ms must be positive")
        return value


def get_settings(**overrides) -> AdapterSettings:
    """Get adapter settings, with explicit overrides taking precedence over the environment."""
    try:
        return AdapterSettings(**overrides)
    except ValueError as e:
        raise ConfigurationError(str(e), details={"overrides": sorted(overrides)}) from e
