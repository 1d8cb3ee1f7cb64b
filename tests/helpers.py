"""Shared builders for tests."""

from __future__ import annotations

from typing import Any, Sequence

from simcore.models import Candle, Signal, StrategyContext
from simcore.strategy import BaseStrategy


def make_candles(closes: Sequence[float], start_ts: int = 1_700_000_000, step: int = 60) -> list[Candle]:
    """Flat candles (open = high = low = close) spaced ``step`` seconds apart."""
    return [
        Candle(ts=start_ts + i * step, open=c, high=c, low=c, close=c, volume=1.0)
        for i, c in enumerate(closes)
    ]


class ScriptedStrategy(BaseStrategy):
    """Emit a fixed signal per index and record every context it sees."""

    name = "scripted"

    def __init__(self, script: dict[int, Any], fail_at: int | None = None):
        self.script = script
        self.fail_at = fail_at
        self.contexts: list[StrategyContext] = []
        self.init_calls = 0

    def init(self, candles):
        self.init_calls += 1

    def on_candle(self, context, candles):
        self.contexts.append(context)
        if self.fail_at is not None and context.index == self.fail_at:
            raise RuntimeError("boom")
        return self.script.get(context.index, Signal.HOLD)
