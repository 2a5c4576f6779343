# src/cambio/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Supports environment variables and an optional .env file with validation.

Files that USE this module:
- cambio.app (builds services from settings: currencies, worker cap, cache, logging)
- cambio.adapters.providers.fxrates (provider URL and HTTP timeout)
- cambio.adapters.persistence.file_store (cache file and TTL)
- tests.test_app (settings validation)

Files that this module USES:
- cambio.shared.validators (currency list parsing and validation)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from pathlib import Path  # Object-oriented filesystem paths
from typing import Optional, Tuple  # Type hints for optional values and tuples

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from cambio.shared.validators import parse_currency_list  # Comma list -> validated codes


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # --- Rate Provider ---
    provider_url: str = Field(
        default="https://api.fxratesapi.com/latest", alias="CAMBIO_PROVIDER_URL"
    )

    # --- HTTP Settings ---
    http_timeout_seconds: int = Field(default=15, alias="HTTP_TIMEOUT_SECONDS", ge=1, le=60)

    # --- Currencies ---
    # Comma separated so it reads naturally in .env files: USD,EUR,BRL
    currencies_csv: str = Field(default="USD,EUR,BRL,GBP,JPY", alias="CAMBIO_CURRENCIES")
    fanout_max_workers: int = Field(default=5, alias="FANOUT_MAX_WORKERS", ge=1, le=5)

    # --- Cache ---
    cache_file: Path = Field(default=Path("./data/rates_cache.json"), alias="CACHE_FILE")
    cache_ttl_seconds: int = Field(default=3600, alias="CACHE_TTL_SECONDS", gt=0)

    # --- Logging ---
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_stdout: bool = Field(default=True, alias="CAMBIO_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @property
    def currencies(self) -> Tuple[str, ...]:
        """Configured currency codes, in declaration order."""
        return tuple(parse_currency_list(self.currencies_csv))

    @field_validator("currencies_csv")
    @classmethod
    def validate_currencies(cls, v: str) -> str:
        """Reject unsupported codes and empty lists early."""
        codes = parse_currency_list(v)  # raises ValueError on bad input
        return ",".join(codes)

    @field_validator("provider_url")
    @classmethod
    def validate_provider_url(cls, v: str) -> str:
        """Provider URL must be an http(s) endpoint without a query string."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("CAMBIO_PROVIDER_URL must start with http:// or https://")
        if "?" in v:
            raise ValueError("CAMBIO_PROVIDER_URL must not carry a query string")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return level


# Global settings instance
settings = Settings()
