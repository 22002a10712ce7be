"""
Settings module for the Org Chart service.

Environment-based configuration with sensible defaults.
All settings can be overridden via ORG_CHART_* environment variables
or a .env file.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from org_chart.config import MAX_SUPPORTED_LEVEL


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have sensible defaults for development.
    """

    # Environment
    environment: str = Field(
        default="development",
        description="Environment name (development, staging, production)"
    )
    service_name: str = Field(
        default="org-chart",
        description="Service name used in logs"
    )

    # Generation
    node_budget: int = Field(
        default=10000,
        ge=1,
        description="Maximum nodes produced per generated chart"
    )
    max_level: int = Field(
        default=8,
        ge=0,
        le=MAX_SUPPORTED_LEVEL,
        description="Deepest level below the root"
    )
    seed: Optional[int] = Field(
        default=None,
        description="Default random seed; unset means a fresh chart every call"
    )

    # API Configuration
    api_host: str = Field(
        default="0.0.0.0",
        description="API server host"
    )
    api_port: int = Field(
        default=7072,
        description="API server port"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )
    log_format: str = Field(
        default="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        description="Log format string"
    )
    datadog_api_key: Optional[str] = Field(
        default=None,
        validation_alias="DATADOG_API_KEY",
        description="Ships logs to Datadog when set"
    )
    datadog_include_loggers: Optional[str] = Field(
        default=None,
        validation_alias="DD_INCLUDE_LOGGERS",
        description="Comma-separated logger prefixes to ship; unset ships all but the noisy ones"
    )

    model_config = SettingsConfigDict(
        env_prefix="ORG_CHART_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are cached for performance. To reload, use:
        get_settings.cache_clear()
    """
    return Settings()
