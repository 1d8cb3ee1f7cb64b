"""Report formatting for backtest results.

Outputs results to console (formatted tables) and JSON files.
"""

from __future__ import annotations

import json
import math
from datetime import datetime, timezone

from backtest.stats import BacktestSummary
from simcore.models import BacktestResult


def _fmt_ts(ts: int) -> str:
    return datetime.fromtimestamp(ts, tz=timezone.utc).strftime("%Y-%m-%d %H:%M")


def _json_float(value: float) -> float | None:
    """JSON has no inf/nan."""
    return value if math.isfinite(value) else None


class ReportFormatter:
    """Format backtest results for display and export."""

    @staticmethod
    def print_console(
        summary: BacktestSummary,
        result: BacktestResult,
        title: str = "",
        last_trades: int = 10,
    ) -> None:
        """Print formatted report to console."""
        print("\n" + "=" * 70)
        print(f"  BACKTEST RESULTS{' — ' + title if title else ''}")
        print("=" * 70)
        if result.equity_curve:
            start = result.equity_curve[0].ts
            end = result.equity_curve[-1].ts
            print(f"  Period: {_fmt_ts(start)} → {_fmt_ts(end)}")
            print(f"  Candles: {len(result.equity_curve)}")

        print("\n" + "-" * 70)
        print("  OVERALL")
        print("-" * 70)
        print(f"  Initial equity: {summary.initial_equity:,.2f}")
        print(f"  Final equity:   {summary.final_equity:,.2f}")
        print(f"  Return:         {summary.return_pct:+.2f}%")
        print(f"  Total trades:   {summary.total_trades}")
        print(f"  Wins:           {summary.wins}")
        print(f"  Losses:         {summary.losses}")
        print(f"  Win rate:       {summary.win_rate:.1f}%")
        print(f"  Total PnL:      {summary.total_pnl:+,.2f}")
        print(f"  Avg trade PnL:  {summary.avg_trade_pnl:+,.2f}")
        print(f"  Profit factor:  {summary.profit_factor:.2f}")
        print(f"  Max drawdown:   {summary.max_drawdown:,.2f} ({summary.max_drawdown_pct:.2f}%)")

        if result.trades and last_trades > 0:
            print("\n" + "-" * 70)
            print(f"  TRADES (last {last_trades})")
            print("-" * 70)
            print(f"  {'Entry':<17} {'Exit':<17} {'Entry px':>11} {'Exit px':>11} {'PnL':>11}")
            for t in result.trades[-last_trades:]:
                print(
                    f"  {_fmt_ts(t.entry_ts):<17} {_fmt_ts(t.exit_ts):<17} "
                    f"{t.entry:>11.4f} {t.exit:>11.4f} {t.pnl:>+11.2f}"
                )

        print("\n" + "=" * 70)

    @staticmethod
    def to_dict(summary: BacktestSummary, result: BacktestResult, metadata: dict | None = None) -> dict:
        """Convert results to JSON-serializable dict."""
        return {
            "metadata": metadata or {},
            "overall": {
                "initial_equity": summary.initial_equity,
                "final_equity": round(summary.final_equity, 8),
                "return_pct": round(summary.return_pct, 4),
                "total_trades": summary.total_trades,
                "wins": summary.wins,
                "losses": summary.losses,
                "win_rate": round(summary.win_rate, 2),
                "total_pnl": round(summary.total_pnl, 8),
                "avg_trade_pnl": round(summary.avg_trade_pnl, 8),
                "profit_factor": _json_float(round(summary.profit_factor, 4)),
                "max_drawdown": round(summary.max_drawdown, 8),
                "max_drawdown_pct": round(summary.max_drawdown_pct, 4),
            },
            "trades": [t.model_dump() for t in result.trades],
            "equity_curve": [p.model_dump() for p in result.equity_curve],
        }

    @staticmethod
    def save_json(
        summary: BacktestSummary,
        result: BacktestResult,
        filepath: str,
        metadata: dict | None = None,
    ) -> None:
        """Save results to JSON file."""
        data = ReportFormatter.to_dict(summary, result, metadata)
        with open(filepath, "w") as f:
            json.dump(data, f, indent=2)
        print(f"\nResults saved to {filepath}")
