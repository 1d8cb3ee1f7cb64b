"""EMA cross with RSI filter.

Long-only trend following:
- BUY when the fast EMA crosses up through the slow EMA and RSI > rsi_entry_min
- SELL when the fast EMA crosses back down through the slow EMA

Indicators are computed once in ``init`` over the full candle series.
This module is pure business logic with no I/O dependencies.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

from simcore.indicators import ema, rsi
from simcore.models import Candle, Signal, StrategyContext, closes
from simcore.strategy.ema_cross_rsi.models import (
    EMA_CROSS_RSI_STRATEGY_NAME,
    EmaCrossRsiConfig,
)
from simcore.strategy.protocol import BaseStrategy
from simcore.strategy.registry import register_strategy

logger = logging.getLogger(__name__)


@register_strategy(EMA_CROSS_RSI_STRATEGY_NAME)
class EmaCrossRsiStrategy(BaseStrategy):
    """EMA crossover with an RSI momentum filter on entries."""

    name = EMA_CROSS_RSI_STRATEGY_NAME

    def __init__(self, config: EmaCrossRsiConfig | None = None):
        self.config = config or EmaCrossRsiConfig()
        self._fast: list[float] = []
        self._slow: list[float] = []
        self._rsi: list[float] = []

    def init(self, candles: Sequence[Candle]) -> None:
        """Precompute fast/slow EMA and RSI for the whole series."""
        values = closes(candles)
        self._fast = ema(values, self.config.fast_period)
        self._slow = ema(values, self.config.slow_period)
        self._rsi = rsi(values, self.config.rsi_period)
        logger.debug(
            "%s: precomputed indicators for %d candles", self.name, len(values)
        )

    def on_candle(self, context: StrategyContext, candles: Sequence[Candle]) -> Signal:
        if len(self._fast) != len(candles):
            self.init(candles)

        i = context.index
        if i < 1:
            return Signal.HOLD

        values = (self._fast[i], self._slow[i], self._fast[i - 1], self._slow[i - 1], self._rsi[i])
        if any(math.isnan(v) for v in values):
            return Signal.HOLD
        fast, slow, prev_fast, prev_slow, momentum = values

        cross_up = fast >= slow and prev_fast < prev_slow
        cross_down = fast <= slow and prev_fast > prev_slow

        if context.position == 0 and cross_up and momentum > self.config.rsi_entry_min:
            return Signal.BUY
        if context.position > 0 and cross_down:
            return Signal.SELL
        return Signal.HOLD
