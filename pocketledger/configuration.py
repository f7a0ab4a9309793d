"""Mini README: Centralised configuration models and helpers for Pocketledger.

Structure:
    * PocketLedgerSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read ``POCKETLEDGER_*`` environment variables,
    choose the service port, and tune the home screen quick actions. The
    configuration is cached so validation runs only once per process.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PocketLedgerSettings(BaseSettings):
    """Runtime configuration for the Pocketledger home screen service."""

    model_config = SettingsConfigDict(
        env_prefix="POCKETLEDGER_",
        env_file=".env",
        case_sensitive=False,
    )

    environment: str = Field(
        "development",
        description="Environment label; 'development' enables auto-reload and DEBUG logging by default.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the home screen service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Default port the home screen service exposes.",
        ge=1,
        le=65535,
    )
    log_level: Optional[str] = Field(
        None,
        description="Root logging level; falls back to a per-environment default when unset.",
    )
    currency_symbol: str = Field(
        "€",
        description="Symbol rendered next to the balance and every amount.",
    )
    quick_deposit_amount: float = Field(
        100.0,
        description="Amount credited by the 'Add money' quick action.",
        gt=0,
    )
    quick_deposit_title: str = Field(
        "Add money",
        description="Title recorded for transactions created by the quick action.",
        min_length=1,
    )

    @field_validator("log_level")
    @classmethod
    def _normalise_level(cls, value: Optional[str]) -> Optional[str]:
        """Store level names upper-cased so logging accepts them verbatim."""

        if value is None or not value.strip():
            return None
        return value.strip().upper()

    @property
    def is_development(self) -> bool:
        return self.environment.strip().lower() == "development"

    @property
    def effective_log_level(self) -> str:
        """Explicit ``log_level`` or DEBUG in development and INFO elsewhere."""

        if self.log_level:
            return self.log_level
        return "DEBUG" if self.is_development else "INFO"


@lru_cache()
def get_settings() -> PocketLedgerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return PocketLedgerSettings()
