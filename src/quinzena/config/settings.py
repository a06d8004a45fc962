# src/quinzena/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Supports environment variables (and a .env file) with validation.

Every per-unit rate can be overridden with RATE_<TIER>_<CATEGORY>, e.g.
RATE_EXPRESS_FLASH=5.25; the table the engine uses is built by
Settings.rate_table().

Files that USE this module:
- quinzena.application.reports (rate table, rolling window, trailing months)
- quinzena.shared.logging_conf (logging settings)

Files that this module USES:
- quinzena.domain.rates (RateTable, DEFAULT_RATES)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Level names for validation
from decimal import Decimal  # Exact per-unit rates
from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from quinzena.domain.models import DeliveryCategory  # Rate table keys
from quinzena.domain.rates import DEFAULT_RATES, RateTable  # Built-in rates and table type

_NORMAL = DEFAULT_RATES.normal
_EXPRESS = DEFAULT_RATES.express


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Normal-tier rates (per delivery) ---
    rate_normal_flash: Decimal = Field(default=_NORMAL[DeliveryCategory.FLASH], alias="RATE_NORMAL_FLASH", ge=0)
    rate_normal_interlog: Decimal = Field(default=_NORMAL[DeliveryCategory.INTERLOG], alias="RATE_NORMAL_INTERLOG", ge=0)
    rate_normal_ecommerce: Decimal = Field(default=_NORMAL[DeliveryCategory.ECOMMERCE], alias="RATE_NORMAL_ECOMMERCE", ge=0)
    rate_normal_loggi: Decimal = Field(default=_NORMAL[DeliveryCategory.LOGGI], alias="RATE_NORMAL_LOGGI", ge=0)

    # --- Express-tier rates (per delivery) ---
    rate_express_flash: Decimal = Field(default=_EXPRESS[DeliveryCategory.FLASH], alias="RATE_EXPRESS_FLASH", ge=0)
    rate_express_interlog: Decimal = Field(default=_EXPRESS[DeliveryCategory.INTERLOG], alias="RATE_EXPRESS_INTERLOG", ge=0)
    rate_express_ecommerce: Decimal = Field(default=_EXPRESS[DeliveryCategory.ECOMMERCE], alias="RATE_EXPRESS_ECOMMERCE", ge=0)
    rate_express_loggi: Decimal = Field(default=_EXPRESS[DeliveryCategory.LOGGI], alias="RATE_EXPRESS_LOGGI", ge=0)

    # --- Reporting windows ---
    rolling_window_days: int = Field(default=30, alias="ROLLING_WINDOW_DAYS", ge=1, le=366)
    trailing_months: int = Field(default=12, alias="TRAILING_MONTHS", ge=1, le=120)

    # --- Logging ---
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=True, alias="QUINZENA_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError("LOG_LEVEL must be DEBUG, INFO, WARNING, ERROR or CRITICAL")
        return level

    def rate_table(self) -> RateTable:
        """
        Build the rate table from the configured rates.

        Returns:
            RateTable with one rate per (tier, category)
        """
        return RateTable.from_mapping(
            normal={
                DeliveryCategory.FLASH: self.rate_normal_flash,
                DeliveryCategory.INTERLOG: self.rate_normal_interlog,
                DeliveryCategory.ECOMMERCE: self.rate_normal_ecommerce,
                DeliveryCategory.LOGGI: self.rate_normal_loggi,
            },
            express={
                DeliveryCategory.FLASH: self.rate_express_flash,
                DeliveryCategory.INTERLOG: self.rate_express_interlog,
                DeliveryCategory.ECOMMERCE: self.rate_express_ecommerce,
                DeliveryCategory.LOGGI: self.rate_express_loggi,
            },
        )


# Global settings instance
settings = Settings()
