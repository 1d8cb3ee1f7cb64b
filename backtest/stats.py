"""Summary statistics for backtest results.

Computes trade counts, win rate, return, profit factor and drawdown
from a BacktestResult's trade ledger and equity curve.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from simcore.models import BacktestResult

logger = logging.getLogger(__name__)


@dataclass
class BacktestSummary:
    """Headline metrics for a single run."""

    initial_equity: float
    final_equity: float
    total_trades: int = 0
    wins: int = 0
    losses: int = 0
    win_rate: float = 0.0
    total_pnl: float = 0.0
    return_pct: float = 0.0
    avg_trade_pnl: float = 0.0
    profit_factor: float = 0.0
    max_drawdown: float = 0.0
    max_drawdown_pct: float = 0.0


def max_drawdown(equity: list[float], start: float | None = None) -> tuple[float, float]:
    """Largest peak-to-trough drop as (absolute, percent of peak)."""
    peak = start if start is not None else (equity[0] if equity else 0.0)
    worst = 0.0
    worst_pct = 0.0
    for value in equity:
        if value > peak:
            peak = value
        drop = peak - value
        if drop > worst:
            worst = drop
            worst_pct = drop / peak * 100 if peak > 0 else 0.0
    return worst, worst_pct


def summarize(result: BacktestResult, initial_equity: float) -> BacktestSummary:
    """Compute a BacktestSummary for ``result``."""
    trades = result.trades
    final_equity = result.final_equity
    if final_equity is None:
        final_equity = initial_equity

    summary = BacktestSummary(
        initial_equity=initial_equity,
        final_equity=final_equity,
        total_trades=len(trades),
        win_rate=result.win_rate,
        total_pnl=result.total_pnl,
    )

    summary.wins = sum(1 for t in trades if t.is_win)
    summary.losses = sum(1 for t in trades if t.pnl < 0)

    if initial_equity > 0:
        summary.return_pct = (final_equity - initial_equity) / initial_equity * 100

    if trades:
        summary.avg_trade_pnl = result.total_pnl / len(trades)
        gross_profit = sum(t.pnl for t in trades if t.pnl > 0)
        gross_loss = -sum(t.pnl for t in trades if t.pnl < 0)
        if gross_loss > 0:
            summary.profit_factor = gross_profit / gross_loss
        elif gross_profit > 0:
            summary.profit_factor = float("inf")

    summary.max_drawdown, summary.max_drawdown_pct = max_drawdown(
        [p.equity for p in result.equity_curve], start=initial_equity
    )

    logger.debug(
        "Summary: trades=%d return=%.2f%% max_dd=%.2f%%",
        summary.total_trades,
        summary.return_pct,
        summary.max_drawdown_pct,
    )
    return summary
