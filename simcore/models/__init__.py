"""Domain models shared by the backtest and paper trading layers."""

from simcore.models.candle import Candle, closes
from simcore.models.order import Order, OrderSide, Position
from simcore.models.signal import Signal, StrategyContext
from simcore.models.trade import BacktestOptions, BacktestResult, EquityPoint, Trade

__all__ = [
    "BacktestOptions",
    "BacktestResult",
    "Candle",
    "EquityPoint",
    "Order",
    "OrderSide",
    "Position",
    "Signal",
    "StrategyContext",
    "Trade",
    "closes",
]
