"""Candle (OHLCV bar) data model."""

from __future__ import annotations

from typing import Sequence

from pydantic import BaseModel, ConfigDict


class Candle(BaseModel):
    """OHLCV candle. ``ts`` is the bar open time in epoch seconds."""

    model_config = ConfigDict(frozen=True)

    ts: int
    open: float
    high: float
    low: float
    close: float
    volume: float = 0.0


def closes(candles: Sequence[Candle]) -> list[float]:
    """Get list of close prices."""
    return [c.close for c in candles]
