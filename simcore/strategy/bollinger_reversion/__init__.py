"""Bollinger band mean-reversion strategy package."""

from simcore.strategy.bollinger_reversion.models import (
    BOLLINGER_REVERSION_STRATEGY_NAME,
    BollingerReversionConfig,
)
from simcore.strategy.bollinger_reversion.strategy import BollingerReversionStrategy

__all__ = [
    "BollingerReversionStrategy",
    "BollingerReversionConfig",
    "BOLLINGER_REVERSION_STRATEGY_NAME",
]
