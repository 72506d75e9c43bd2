"""
Payroll Core - Configuration Settings

This module handles library configuration using Pydantic Settings.
Environment variables (prefixed PAYROLL_) are loaded from a .env file
when one is present.
"""

from decimal import Decimal
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Payroll core settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PAYROLL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # ===========================================
    # APPLICATION CONFIGURATION
    # ===========================================
    app_name: str = "Payroll Core"
    log_level: str = "INFO"

    # ===========================================
    # RATE TABLES
    # ===========================================
    # Emit a WARNING when a fiscal year has no table and the latest is used
    warn_on_rate_fallback: bool = True

    # ===========================================
    # PAYSLIP DEFAULTS
    # ===========================================
    default_tax_rate_percent: Decimal = Field(default=Decimal("0"), ge=0, le=100)
    default_weekly_hours: Decimal = Field(default=Decimal("35"), gt=0, le=48)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
