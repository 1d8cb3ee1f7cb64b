"""EMA cross + RSI filter strategy package.

Importing this package triggers strategy registration via the
@register_strategy decorator on EmaCrossRsiStrategy.
"""

from simcore.strategy.ema_cross_rsi.models import (
    EMA_CROSS_RSI_STRATEGY_NAME,
    EmaCrossRsiConfig,
)
from simcore.strategy.ema_cross_rsi.strategy import EmaCrossRsiStrategy

__all__ = [
    "EmaCrossRsiStrategy",
    "EmaCrossRsiConfig",
    "EMA_CROSS_RSI_STRATEGY_NAME",
]
