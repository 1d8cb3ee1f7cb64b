"""Strategy protocol defining the interface all strategies must implement.

This module provides:
- Strategy: Runtime-checkable Protocol the backtest engine drives
- BaseStrategy: Convenience base class with a no-op ``init`` hook
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence, runtime_checkable

from simcore.models.candle import Candle
from simcore.models.signal import Signal, StrategyContext


@runtime_checkable
class Strategy(Protocol):
    """Protocol that all trading strategies must implement.

    The engine calls ``init`` once before the replay and ``on_candle`` once
    per candle in ascending order. Any internal state is the strategy's own
    and must be deterministic for a given candle sequence.
    """

    @property
    def name(self) -> str:
        """Strategy identifier (e.g., 'ema_cross_rsi')."""
        ...

    def init(self, candles: Sequence[Candle]) -> None:
        """Precompute anything needed before the replay starts."""
        ...

    def on_candle(self, context: StrategyContext, candles: Sequence[Candle]) -> Signal | Any:
        """Decide what to do at ``context.index``.

        Args:
            context: Current step (index, candle, position, equity).
            candles: The full candle series being replayed.

        Returns:
            A Signal. Anything else is treated as HOLD by the engine.
        """
        ...


class BaseStrategy:
    """Base class for strategies: ``init`` is a no-op, ``on_candle`` is required."""

    name: str = "base"

    def init(self, candles: Sequence[Candle]) -> None:
        return None

    def on_candle(self, context: StrategyContext, candles: Sequence[Candle]) -> Signal:
        """Decide what to do at ``context.index``. Subclasses must override this."""
        raise NotImplementedError(f"{type(self).__name__} must implement on_candle")
