"""Strategy signal and per-step context models."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from simcore.models.candle import Candle


class Signal(str, Enum):
    """Discrete strategy decision for a single candle."""

    BUY = "buy"
    SELL = "sell"
    HOLD = "hold"

    @classmethod
    def normalize(cls, value: Any) -> "Signal":
        """Map any strategy output to a Signal.

        Signal members and the exact values "buy", "sell" and "hold" map to
        themselves. Everything else (None, other spellings, other types) is HOLD.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                return cls.HOLD
        return cls.HOLD


class StrategyContext(BaseModel):
    """Read-only view of the replay state handed to a strategy each step."""

    model_config = ConfigDict(frozen=True)

    index: int
    candle: Candle
    position: float = Field(default=0.0, ge=0)  # base-asset quantity held
    equity: float = 0.0  # uninvested quote-currency balance
