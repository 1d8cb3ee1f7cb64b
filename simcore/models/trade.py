"""Backtest trade, options, and result models."""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field


class BacktestOptions(BaseModel):
    """Run parameters. Fees and slippage are in basis points per side."""

    model_config = ConfigDict(frozen=True)

    initial_equity: float = Field(ge=0)
    fee_bps: float = Field(default=0.0, ge=0)
    slippage_bps: float = Field(default=0.0, ge=0)

    @property
    def fee(self) -> float:
        return self.fee_bps / 10000

    @property
    def slippage(self) -> float:
        return self.slippage_bps / 10000


class Trade(BaseModel):
    """One completed round trip (open + close)."""

    model_config = ConfigDict(frozen=True)

    entry_ts: int
    entry: float
    exit_ts: int
    exit: float
    qty: float
    pnl: float

    @property
    def is_win(self) -> bool:
        """Closed at a profit (break-even is not a win)."""
        return self.pnl > 0


class EquityPoint(BaseModel):
    """Mark-to-market account value at one candle."""

    model_config = ConfigDict(frozen=True)

    ts: int
    equity: float


@dataclass
class BacktestResult:
    """Trade ledger and equity curve produced by a single run."""

    trades: list[Trade] = field(default_factory=list)
    equity_curve: list[EquityPoint] = field(default_factory=list)
    total_pnl: float = 0.0
    win_rate: float = 0.0  # percent of trades with pnl > 0

    @property
    def final_equity(self) -> float | None:
        if not self.equity_curve:
            return None
        return self.equity_curve[-1].equity
