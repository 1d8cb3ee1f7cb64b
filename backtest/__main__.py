"""CLI entry point for the backtesting system.

Usage:
    python -m backtest --symbol BTCUSDT --interval 15m --fast 20 --slow 50
    python -m backtest --symbol BTCUSDT --strategy bollinger_reversion --period 20 --k 2
    python -m backtest --symbol BTCUSDT --output results.json
"""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from backtest.candle_source import CsvCandleSource
from backtest.config import get_backtest_settings
from backtest.engine import BacktestAborted, run_backtest
from backtest.report import ReportFormatter
from backtest.stats import summarize
from simcore.models import BacktestOptions
from simcore.strategy import create_strategy, list_strategies
from simcore.strategy.bollinger_reversion import (
    BOLLINGER_REVERSION_STRATEGY_NAME,
    BollingerReversionConfig,
)
from simcore.strategy.ema_cross_rsi import EMA_CROSS_RSI_STRATEGY_NAME, EmaCrossRsiConfig

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    settings = get_backtest_settings()
    parser = argparse.ArgumentParser(
        description="Backtest a strategy over Binance kline CSV files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m backtest --symbol BTCUSDT --interval 15m
  python -m backtest --symbol BTCUSDT --fast 10 --slow 30 --fee-bps 5
  python -m backtest --symbol ETHUSDT --strategy bollinger_reversion --period 20 --k 2.5
        """,
    )
    parser.add_argument("--symbol", type=str, required=True, help="Symbol, e.g. BTCUSDT")
    parser.add_argument("--interval", type=str, default="15m", help="Kline interval (default: 15m)")
    parser.add_argument(
        "--strategy",
        type=str,
        default=EMA_CROSS_RSI_STRATEGY_NAME,
        choices=list_strategies(),
        help=f"Strategy name (default: {EMA_CROSS_RSI_STRATEGY_NAME})",
    )
    parser.add_argument(
        "--data-dir",
        type=str,
        default=settings.data_dir,
        help=f"Root of <SYMBOL>/<INTERVAL>/*.csv files (default: {settings.data_dir})",
    )

    # ema_cross_rsi
    parser.add_argument("--fast", type=int, default=20, help="Fast EMA period")
    parser.add_argument("--slow", type=int, default=50, help="Slow EMA period")
    parser.add_argument("--rsi-period", type=int, default=14, help="RSI period")

    # bollinger_reversion
    parser.add_argument("--period", type=int, default=20, help="Bollinger period")
    parser.add_argument("--k", type=float, default=2.0, help="Bollinger stddev multiplier")

    # Execution
    parser.add_argument("--initial-equity", type=float, default=settings.initial_equity)
    parser.add_argument("--fee-bps", type=float, default=settings.fee_bps)
    parser.add_argument("--slippage-bps", type=float, default=settings.slippage_bps)

    parser.add_argument(
        "--output", "-o",
        type=str,
        default=None,
        help="Output file path for JSON results",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose logging",
    )
    return parser.parse_args(argv)


def build_strategy(args: argparse.Namespace):
    """Instantiate the selected strategy with its CLI parameters."""
    if args.strategy == EMA_CROSS_RSI_STRATEGY_NAME:
        config = EmaCrossRsiConfig(
            fast_period=args.fast,
            slow_period=args.slow,
            rsi_period=args.rsi_period,
        )
    elif args.strategy == BOLLINGER_REVERSION_STRATEGY_NAME:
        config = BollingerReversionConfig(period=args.period, k=args.k)
    else:
        return create_strategy(args.strategy)
    return create_strategy(args.strategy, config=config)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    symbol = args.symbol.upper()
    source = CsvCandleSource(args.data_dir)
    try:
        candles = source.load(symbol, args.interval)
    except FileNotFoundError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    try:
        strategy = build_strategy(args)
        options = BacktestOptions(
            initial_equity=args.initial_equity,
            fee_bps=args.fee_bps,
            slippage_bps=args.slippage_bps,
        )
    except ValidationError as exc:
        print(f"Error: invalid parameters\n{exc}", file=sys.stderr)
        return 1

    try:
        result = run_backtest(candles, strategy, options)
    except BacktestAborted as exc:
        logger.error("%s (%d trades before failure)", exc, len(exc.partial.trades))
        return 1

    summary = summarize(result, options.initial_equity)
    ReportFormatter.print_console(summary, result, title=f"{symbol} {args.interval} {strategy.name}")

    if args.output:
        ReportFormatter.save_json(
            summary,
            result,
            args.output,
            metadata={
                "symbol": symbol,
                "interval": args.interval,
                "strategy": strategy.name,
                "candles": len(candles),
                "fee_bps": options.fee_bps,
                "slippage_bps": options.slippage_bps,
            },
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
