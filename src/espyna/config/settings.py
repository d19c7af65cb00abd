"""Application settings for espyna.

Settings are read from environment variables (and an optional ``.env`` file)
through pydantic-settings. Provider names select which repository adapters
are constructed at startup.
"""

from functools import lru_cache
from typing import Any, Dict, Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    DEFAULT_BUSINESS_TYPE,
    DEFAULT_PAGE_SIZE,
    DEFAULT_PROVIDER,
    MAX_PAGE_SIZE,
    MAX_SEARCH_RESULTS,
)


class EspynaSettings(BaseSettings):
    """Runtime configuration for the espyna backend."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Application
    app_name: str = Field(default="espyna", alias="APP_NAME")
    environment: str = Field(default="development", alias="ENVIRONMENT")
    business_type: str = Field(default=DEFAULT_BUSINESS_TYPE, alias="BUSINESS_TYPE")

    # Database provider
    database_provider: str = Field(default=DEFAULT_PROVIDER, alias="PROVIDER_PRIMARY")
    database_host: str = Field(default="localhost", alias="DATABASE_HOST")
    database_port: int = Field(default=5432, alias="DATABASE_PORT")
    database_name: str = Field(default="espyna", alias="DATABASE_NAME")
    database_user: Optional[str] = Field(default=None, alias="DATABASE_USER")
    database_password: Optional[SecretStr] = Field(default=None, alias="DATABASE_PASSWORD")
    database_table_prefix: str = Field(default="", alias="DATABASE_TABLE_PREFIX")

    # List processing
    default_page_size: int = Field(default=DEFAULT_PAGE_SIZE, alias="DEFAULT_PAGE_SIZE")
    max_page_size: int = Field(default=MAX_PAGE_SIZE, alias="MAX_PAGE_SIZE")
    max_search_results: int = Field(default=MAX_SEARCH_RESULTS, alias="MAX_SEARCH_RESULTS")

    # Transactions
    transaction_max_retries: int = Field(default=0, alias="TRANSACTION_MAX_RETRIES")

    # Logging
    log_level: Optional[str] = Field(default=None, alias="LOG_LEVEL")
    log_verbosity: str = Field(default="NORMAL", alias="LOG_VERBOSITY")
    log_format: str = Field(default="simple", alias="LOG_FORMAT")

    @field_validator("database_provider", "business_type")
    @classmethod
    def normalize_name(cls, value: str) -> str:
        return value.strip().lower()

    @field_validator("default_page_size", "max_page_size")
    @classmethod
    def validate_page_size(cls, value: int) -> int:
        if value < 1:
            raise ValueError("Page size must be >= 1")
        return value

    @field_validator("transaction_max_retries")
    @classmethod
    def validate_retries(cls, value: int) -> int:
        if value < 0:
            raise ValueError("Transaction retries must be >= 0")
        return value

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    def get_database_config(self) -> Dict[str, Any]:
        """Connection parameters handed to the selected database provider."""
        return {
            "provider": self.database_provider,
            "host": self.database_host,
            "port": self.database_port,
            "database": self.database_name,
            "user": self.database_user,
            "password": self.database_password.get_secret_value() if self.database_password else None,
            "table_prefix": self.database_table_prefix,
            "business_type": self.business_type,
        }


@lru_cache()
def get_settings() -> EspynaSettings:
    """Get cached settings instance."""
    return EspynaSettings()


def reset_settings() -> None:
    """Clear the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()
