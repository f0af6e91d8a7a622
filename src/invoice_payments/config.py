"""Configuration loaded from environment variables.

Variables use the INVOICE_PAYMENTS_ prefix (e.g. INVOICE_PAYMENTS_LOG_LEVEL)
and may also come from a local .env file.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for the payment processor and its logging."""

    model_config = SettingsConfigDict(
        env_prefix="INVOICE_PAYMENTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Tax
    commercial_tax_rate: Decimal = Field(
        default=Decimal("0.14"),
        ge=0,
        le=1,
        description="Surcharge applied to every payment on a commercial invoice",
    )
    tax_decimal_places: int = Field(
        default=2,
        ge=0,
        le=8,
        description="Minor-unit precision the tax is rounded to (half-even)",
    )

    # Concurrency
    serialize_per_invoice: bool = Field(
        default=True,
        description="Use an in-process lock per invoice reference when none is injected",
    )

    # Observability
    log_level: str = "INFO"
    log_format: Literal["text", "json"] = "text"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = str(v).upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache
def get_settings() -> Settings:
    return Settings()
