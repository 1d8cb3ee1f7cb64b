"""Backtest-specific configuration.

Defaults for the CLI, loaded from ``BACKTEST_``-prefixed environment
variables or a ``.env`` file.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BacktestSettings(BaseSettings):
    """Backtest configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="BACKTEST_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Root of <SYMBOL>/<INTERVAL>/*.csv kline dumps
    data_dir: str = "data/binance/klines"

    initial_equity: float = Field(default=10000.0, ge=0)
    fee_bps: float = Field(default=1.0, ge=0)
    slippage_bps: float = Field(default=1.0, ge=0)


@lru_cache
def get_backtest_settings() -> BacktestSettings:
    """Get cached backtest settings instance."""
    return BacktestSettings()
