"""Paper trading service.

Validates raw order payloads, runs the pre-trade risk gate, places
admitted orders in the store, and reports the resulting position.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from pydantic import BaseModel, Field, field_validator

from paper.ledger import OrderStore, compute_position
from paper.risk import OrderIntent, RejectReason, RiskConfig, pre_trade_check
from simcore.models import Order, OrderSide, Position

logger = logging.getLogger(__name__)


class RiskRejected(Exception):
    """An order intent failed the pre-trade risk check."""

    def __init__(self, reason: RejectReason, intent: OrderIntent):
        super().__init__(reason.value)
        self.reason = reason
        self.intent = intent


class PaperOrderRequest(BaseModel):
    """Raw paper order payload as submitted by a client."""

    symbol: str = Field(min_length=2, max_length=20)
    side: OrderSide
    qty: float = Field(gt=0, allow_inf_nan=False)
    price: float = Field(gt=0, allow_inf_nan=False)

    @field_validator("symbol", mode="after")
    @classmethod
    def _upper_symbol(cls, v: str) -> str:
        return v.strip().upper()

    @field_validator("side", mode="before")
    @classmethod
    def _upper_side(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().upper()
        return v

    def to_intent(self) -> OrderIntent:
        return OrderIntent(symbol=self.symbol, side=self.side, qty=self.qty, price=self.price)


class OrderResult(BaseModel):
    """A placed order together with the symbol's updated position."""

    order: Order
    position: Position


class LedgerSnapshot(BaseModel):
    """Orders (optionally for one symbol) and their net position."""

    orders: list[Order]
    position: Position | None = None


class PaperTradingService:
    """Risk-gated order placement over an OrderStore."""

    def __init__(self, store: OrderStore, risk_config: RiskConfig | None = None):
        self.store = store
        self.risk_config = risk_config or RiskConfig()

    def submit(self, payload: PaperOrderRequest | Mapping[str, Any]) -> OrderResult:
        """Validate, risk-check and place an order.

        Raises:
            pydantic.ValidationError: If the payload is malformed.
            RiskRejected: If the risk gate rejects the order.
        """
        request = (
            payload
            if isinstance(payload, PaperOrderRequest)
            else PaperOrderRequest.model_validate(payload)
        )
        intent = request.to_intent()

        check = pre_trade_check(self.risk_config, intent)
        if not check.ok:
            raise RiskRejected(check.reason, intent)

        order = self.store.place_order(intent.symbol, intent.side, intent.qty, intent.price)
        position = compute_position(self.store.list_orders(order.symbol))
        logger.debug(
            "%s position: qty=%.8f avg_entry=%s realized=%.8f",
            position.symbol,
            position.qty,
            position.avg_entry,
            position.realized_pnl,
        )
        return OrderResult(order=order, position=position)

    def snapshot(self, symbol: str | None = None) -> LedgerSnapshot:
        """Orders for ``symbol`` (or all) and the position they add up to.

        ``position`` is None when no symbol is given or there are no orders.
        """
        if symbol is not None:
            symbol = symbol.upper()
        orders = self.store.list_orders(symbol)
        position = compute_position(orders) if orders and symbol is not None else None
        return LedgerSnapshot(orders=orders, position=position)
