"""
Configuration Management for Tax Copilot

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: Environment-driven settings live here, next to the
LedgerConfig that the engine is constructed with. Nothing in the ledger
reads ambient global state; the app builds a LedgerConfig and hands it over.
"""

from decimal import Decimal
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tax_copilot.models.transaction import (
    GST_RATES,
    GST_REGISTRATION_THRESHOLD,
    Language,
    SupplyCategory,
)


class StorageSettings(BaseSettings):
    """Local key-value storage configuration."""

    model_config = SettingsConfigDict(
        env_prefix="TAX_COPILOT_STORAGE_",
        extra="ignore"
    )

    data_dir: Path = Field(
        default=Path(".tax_copilot"),
        description="Directory holding the local storage file"
    )
    file_name: str = Field(
        default="local_storage.json",
        min_length=1,
        description="Name of the JSON file all keys are stored in"
    )

    # Storage keys
    transactions_key: str = Field(
        default="ps15_transactions",
        description="Key for the serialized transaction list"
    )
    language_key: str = Field(
        default="ps15_language",
        description="Key for the language preference"
    )

    write_attempts: int = Field(
        default=3,
        ge=1,
        le=10,
        description="How many times a failed write is attempted"
    )

    @property
    def storage_path(self) -> Path:
        """Full path to the storage file."""
        return self.data_dir / self.file_name


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="TAX_COPILOT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Environment
    app_environment: str = Field(
        default="development",
        description="Application environment"
    )
    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    log_level: str = Field(
        default="INFO",
        description="Log level for the structured logger"
    )

    default_language: Language = Field(
        default=Language.ENGLISH,
        description="Language used when no preference is stored"
    )
    export_filename_prefix: str = Field(
        default="ps15_transactions",
        min_length=1,
        description="Prefix of the downloaded CSV file name"
    )

    @field_validator('log_level')
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept any casing, reject unknown levels."""
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


class LedgerConfig(BaseModel):
    """
    Configuration the ledger engine is constructed with.

    The GST rate table and registration threshold are fixed for the
    application; they are carried here so the engine never reaches for
    module globals, not so users can change them.
    """
    model_config = ConfigDict(frozen=True)

    gst_rates: dict[SupplyCategory, Decimal] = Field(
        default_factory=lambda: dict(GST_RATES),
        description="GST rate per supply category"
    )
    registration_threshold: Decimal = Field(
        default=GST_REGISTRATION_THRESHOLD,
        gt=0,
        description="Turnover above which GST registration is required (INR)"
    )
    rollup_months: int = Field(
        default=6,
        ge=1,
        description="How many month buckets the monthly rollup keeps"
    )

    def rate_for(self, category: SupplyCategory) -> Decimal:
        """Look up the GST rate for a category."""
        return self.gst_rates[category]


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def storage(self) -> StorageSettings:
        return StorageSettings()

    @property
    def app(self) -> AppSettings:
        return AppSettings()

    @property
    def ledger(self) -> LedgerConfig:
        return LedgerConfig()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, bool]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid}, with a
    `<name>_error` entry for every section that failed.
    """
    results = {}

    settings = get_settings()

    for name in ("storage", "app", "ledger"):
        try:
            getattr(settings, name)
            results[name] = True
        except ValueError as e:
            results[name] = False
            results[f"{name}_error"] = str(e)

    return results
