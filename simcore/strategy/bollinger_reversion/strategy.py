"""Bollinger band mean reversion.

- BUY when the close drops below the lower band while flat
- SELL when the close recovers to the middle band while long
"""

from __future__ import annotations

import math
from typing import Sequence

from simcore.indicators import BollingerBands, bollinger_bands
from simcore.models import Candle, Signal, StrategyContext, closes
from simcore.strategy.bollinger_reversion.models import (
    BOLLINGER_REVERSION_STRATEGY_NAME,
    BollingerReversionConfig,
)
from simcore.strategy.protocol import BaseStrategy
from simcore.strategy.registry import register_strategy


@register_strategy(BOLLINGER_REVERSION_STRATEGY_NAME)
class BollingerReversionStrategy(BaseStrategy):
    """Buy oversold closes below the lower band, exit at the mean."""

    name = BOLLINGER_REVERSION_STRATEGY_NAME

    def __init__(self, config: BollingerReversionConfig | None = None):
        self.config = config or BollingerReversionConfig()
        self._bands: BollingerBands | None = None

    def init(self, candles: Sequence[Candle]) -> None:
        self._bands = bollinger_bands(closes(candles), self.config.period, self.config.k)

    def on_candle(self, context: StrategyContext, candles: Sequence[Candle]) -> Signal:
        if self._bands is None or len(self._bands) != len(candles):
            self.init(candles)

        band = self._bands[context.index]
        if math.isnan(band.middle):
            return Signal.HOLD

        close = context.candle.close
        if context.position == 0 and close < band.lower:
            return Signal.BUY
        if context.position > 0 and close >= band.middle:
            return Signal.SELL
        return Signal.HOLD
