"""
Shared configuration management for the Folio access layer.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseConfig(BaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_prefix="FOLIO_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    env: str = Field(default="local")
    log_level: str = Field(default="info")


class PolicyConfig(BaseConfig):
    """Policy service configuration."""

    service_name: str = "policies"

    # Emit a debug event for every can() decision
    log_decisions: bool = Field(default=False)

    # Raise instead of warning when a rule covers an already governed triple
    strict_registry: bool = Field(default=False)


def get_config() -> PolicyConfig:
    """Get configuration for the policy service."""
    return PolicyConfig()
