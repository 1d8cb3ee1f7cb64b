"""Backtesting system.

Replays candle series through strategies from simcore/ and reports the
resulting trade ledger and equity curve.

Usage:
    python -m backtest --symbol BTCUSDT --interval 15m
    python -m backtest --symbol ETHUSDT --strategy bollinger_reversion --period 20 --k 2
"""

from backtest.engine import BacktestAborted, run_backtest
from backtest.stats import BacktestSummary, summarize

__all__ = ["BacktestAborted", "BacktestSummary", "run_backtest", "summarize"]
