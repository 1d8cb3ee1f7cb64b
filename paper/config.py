"""Paper trading configuration."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PaperSettings(BaseSettings):
    """Risk limits for paper order submission, loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Unset = no limit
    max_notional_per_order: float | None = Field(default=None, ge=0)
    max_position_qty: float | None = Field(default=None, ge=0)

    # Comma-separated, e.g. "BTCUSDT,ETHUSDT"; empty = any symbol
    allowed_symbols: str = ""

    @property
    def allowed_symbol_set(self) -> frozenset[str] | None:
        symbols = {s.strip().upper() for s in self.allowed_symbols.split(",") if s.strip()}
        return frozenset(symbols) if symbols else None


@lru_cache
def get_paper_settings() -> PaperSettings:
    """Get cached settings instance."""
    return PaperSettings()
