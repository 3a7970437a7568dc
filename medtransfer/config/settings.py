# medtransfer/config/settings.py
"""
Application settings with Pydantic v2 BaseSettings.

Environment variables with MEDTRANSFER_ prefix.
"""
from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """medtransfer application settings."""

    model_config = SettingsConfigDict(
        env_prefix="MEDTRANSFER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # Logging
    LOG_LEVEL: str = "INFO"

    # CSV import
    CSV_ENCODING: str = "utf-8-sig"
    DEFAULT_TRANSFER_TIME: str = "00:00"

    # Billing rules
    URBAN_KM_THRESHOLD: float = Field(default=50.0, ge=0.0, description="Trips up to this distance bill the fixed rate")
    WAITING_BILLABLE_HOURS: float = Field(default=1.0, ge=0.0, description="Hours billed when a transfer has waiting")
    BILLING_RULES_PATH: Optional[str] = None

    # Dashboard
    RECENT_TRANSFERS_LIMIT: int = Field(default=5, ge=0)


# Singleton instance
settings = Settings()


__all__ = ["Settings", "settings"]
