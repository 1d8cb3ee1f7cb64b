"""Paper order and position models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class OrderSide(str, Enum):
    """Order side enum."""

    BUY = "BUY"
    SELL = "SELL"

    @property
    def sign(self) -> int:
        return 1 if self is OrderSide.BUY else -1


class Order(BaseModel):
    """An admitted order. Immutable once placed."""

    model_config = ConfigDict(frozen=True)

    id: str
    ts: int  # epoch milliseconds
    symbol: str
    side: OrderSide
    qty: float
    price: float


class Position(BaseModel):
    """Net position reconstructed from an order history."""

    symbol: str = ""
    qty: float = 0.0  # signed: > 0 long, < 0 short
    avg_entry: float | None = None
    realized_pnl: float = 0.0

    @property
    def is_flat(self) -> bool:
        return self.qty == 0
