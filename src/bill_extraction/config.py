"""Application configuration via environment variables with BILL_ prefix."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from bill_extraction.models.locale import Locale


class Settings(BaseSettings):
    """Bill extraction service configuration.

    All settings are read from environment variables prefixed with ``BILL_``.
    """

    model_config = SettingsConfigDict(env_prefix="BILL_")

    # ── Extraction ───────────────────────────────────────────────────────
    # Used when a request does not name a locale
    default_locale: Locale = Locale.TURKISH
    max_text_length: int = Field(default=20_000, ge=1)

    # ── Logging ──────────────────────────────────────────────────────────
    log_level: str = "INFO"

    # ── API ─────────────────────────────────────────────────────────────────
    cors_origins: list[str] = Field(default=["http://localhost:3000"])
