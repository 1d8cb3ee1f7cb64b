"""Sequential backtest engine.

Replays a candle series through a strategy one candle at a time and
simulates fills for a single long-only position:

- BUY is acted on only while flat, SELL only while long
- Entry fill = close * (1 + slippage), quantity = equity * (1 - fee) / fill
- Exit fill = close * (1 - slippage), proceeds = qty * fill * (1 - fee)
- Every step records equity + position * close on the equity curve
- A position still open after the last candle is force-closed there

All state is local to one ``run_backtest`` call, so identical inputs
always produce identical outputs.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Sequence

from simcore.models import (
    BacktestOptions,
    BacktestResult,
    Candle,
    EquityPoint,
    Signal,
    StrategyContext,
    Trade,
)
from simcore.strategy import Strategy

logger = logging.getLogger(__name__)


class BacktestAborted(Exception):
    """A strategy raised mid-run.

    ``partial`` holds the trades and equity curve recorded before the
    failing candle; the strategy's exception is chained as ``__cause__``.
    """

    def __init__(self, index: int, partial: BacktestResult):
        super().__init__(f"strategy failed at candle index {index}")
        self.index = index
        self.partial = partial


def _summarize(trades: list[Trade], curve: list[EquityPoint]) -> BacktestResult:
    total_pnl = sum(t.pnl for t in trades)
    wins = sum(1 for t in trades if t.is_win)
    win_rate = wins / len(trades) * 100 if trades else 0.0
    return BacktestResult(
        trades=trades,
        equity_curve=curve,
        total_pnl=total_pnl,
        win_rate=win_rate,
    )


def run_backtest(
    candles: Sequence[Candle],
    strategy: Strategy,
    options: BacktestOptions | Mapping[str, Any],
) -> BacktestResult:
    """
    Run ``strategy`` over ``candles`` and return the trade ledger and equity curve.

    Args:
        candles: Candles in ascending ``ts`` order
        strategy: Object satisfying the Strategy protocol
        options: BacktestOptions, or a mapping of its fields

    Returns:
        BacktestResult with trades, equity curve, total pnl and win rate

    Raises:
        BacktestAborted: If the strategy raises; carries partial results
    """
    if not isinstance(options, BacktestOptions):
        options = BacktestOptions.model_validate(options)

    fee = options.fee
    slip = options.slippage

    equity = options.initial_equity
    position = 0.0
    entry_price = 0.0
    entry_ts = 0
    trades: list[Trade] = []
    curve: list[EquityPoint] = []

    name = getattr(strategy, "name", type(strategy).__name__)
    logger.info(
        "Backtest start: strategy=%s candles=%d equity=%.2f fee_bps=%s slippage_bps=%s",
        name,
        len(candles),
        equity,
        options.fee_bps,
        options.slippage_bps,
    )

    init = getattr(strategy, "init", None)
    if init is not None:
        try:
            init(candles)
        except Exception as exc:
            logger.error("Backtest aborted: %s init failed: %s", name, exc)
            raise BacktestAborted(-1, _summarize(trades, curve)) from exc

    for i, candle in enumerate(candles):
        context = StrategyContext(index=i, candle=candle, position=position, equity=equity)
        try:
            raw = strategy.on_candle(context, candles)
        except Exception as exc:
            logger.error("Backtest aborted: %s failed at index %d: %s", name, i, exc)
            raise BacktestAborted(i, _summarize(trades, curve)) from exc

        signal = Signal.normalize(raw)

        if signal is Signal.BUY and position == 0:
            fill = candle.close * (1 + slip)
            qty = (equity * (1 - fee)) / fill if fill > 0 else 0.0
            if qty > 0:
                position = qty
                entry_price = fill
                entry_ts = candle.ts
                equity = 0.0
                logger.debug("BUY %.8f @ %.8f ts=%d", qty, fill, candle.ts)

        elif signal is Signal.SELL and position > 0:
            fill = candle.close * (1 - slip)
            proceeds = position * fill * (1 - fee)
            pnl = (fill - entry_price) * position
            trades.append(
                Trade(
                    entry_ts=entry_ts,
                    entry=entry_price,
                    exit_ts=candle.ts,
                    exit=fill,
                    qty=position,
                    pnl=pnl,
                )
            )
            logger.debug("SELL %.8f @ %.8f ts=%d pnl=%.8f", position, fill, candle.ts, pnl)
            position = 0.0
            equity += proceeds

        curve.append(EquityPoint(ts=candle.ts, equity=equity + position * candle.close))

    # Force-close at the last candle; its curve point is replaced, not appended
    if position > 0:
        last = candles[-1]
        fill = last.close * (1 - slip)
        proceeds = position * fill * (1 - fee)
        pnl = (fill - entry_price) * position
        trades.append(
            Trade(
                entry_ts=entry_ts,
                entry=entry_price,
                exit_ts=last.ts,
                exit=fill,
                qty=position,
                pnl=pnl,
            )
        )
        logger.debug("Force-close %.8f @ %.8f ts=%d pnl=%.8f", position, fill, last.ts, pnl)
        position = 0.0
        equity += proceeds
        curve[-1] = EquityPoint(ts=last.ts, equity=equity)

    result = _summarize(trades, curve)
    logger.info(
        "Backtest done: strategy=%s trades=%d total_pnl=%.4f win_rate=%.1f%%",
        name,
        len(result.trades),
        result.total_pnl,
        result.win_rate,
    )
    return result
