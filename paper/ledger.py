"""Paper order store and position reconstruction.

``OrderStore`` is an append-only, insertion-ordered order history that
callers create and pass around explicitly. It is a single-writer
resource: concurrent ``place_order`` callers must serialize externally
(one store per trading unit, or a lock around writes), because
``compute_position`` relies on a total order over the history.

``compute_position`` folds an order sequence into a signed net position
with a weighted average entry and realized PnL.
"""

from __future__ import annotations

import logging
import math
import time
import uuid
from typing import Callable, Iterable

from simcore.models import Order, OrderSide, Position

logger = logging.getLogger(__name__)

# Net quantities this close to zero are float residue of a full close
QTY_EPSILON = 1e-12


def _now_ms() -> int:
    return int(time.time() * 1000)


def _new_id() -> str:
    return uuid.uuid4().hex


class OrderStore:
    """In-memory order history."""

    def __init__(
        self,
        clock: Callable[[], int] = _now_ms,
        id_factory: Callable[[], str] = _new_id,
    ):
        self._clock = clock
        self._id_factory = id_factory
        self._orders: list[Order] = []

    def place_order(
        self,
        symbol: str,
        side: OrderSide | str,
        qty: float,
        price: float,
    ) -> Order:
        """Append a new order and return it.

        Raises:
            ValueError: If qty or price is not a positive finite number,
                or side is not BUY/SELL.
        """
        if not math.isfinite(qty) or qty <= 0:
            raise ValueError("qty must be > 0")
        if not math.isfinite(price) or price <= 0:
            raise ValueError("price must be > 0")
        if not isinstance(side, OrderSide):
            side = OrderSide(str(side).upper())

        order = Order(
            id=self._id_factory(),
            ts=self._clock(),
            symbol=symbol,
            side=side,
            qty=qty,
            price=price,
        )
        self._orders.append(order)
        logger.info(
            "Paper order %s: %s %s %.8f @ %.8f",
            order.id,
            order.side.value,
            order.symbol,
            order.qty,
            order.price,
        )
        return order

    def list_orders(self, symbol: str | None = None) -> list[Order]:
        """Orders for ``symbol`` (or all orders) in insertion order."""
        if symbol is None:
            return list(self._orders)
        return [o for o in self._orders if o.symbol == symbol]

    def clear(self) -> None:
        """Drop the whole history."""
        self._orders.clear()

    def __len__(self) -> int:
        return len(self._orders)


def compute_position(orders: Iterable[Order]) -> Position:
    """
    Reconstruct the net position from an order history.

    - Orders that open or add to the current side reweight the average
      entry: (avg * |qty| + price * fill) / (|qty| + fill)
    - Orders against the current side realize PnL on the closed quantity
      and leave the average entry unchanged
    - Crossing through zero opens the remainder at the crossing order's price
    - A flat position has no average entry; a net quantity within
      ``QTY_EPSILON`` of zero counts as flat

    Args:
        orders: Orders for one symbol, in the order they were placed

    Returns:
        Position; the symbol is taken from the first order
    """
    symbol = ""
    qty = 0.0
    avg_entry: float | None = None
    realized = 0.0

    for order in orders:
        if not symbol:
            symbol = order.symbol
        direction = order.side.sign
        prev_qty = qty
        qty = prev_qty + direction * order.qty
        if math.isclose(qty, 0.0, abs_tol=QTY_EPSILON):
            qty = 0.0

        if prev_qty == 0 or (prev_qty > 0) == (direction > 0):
            held = abs(prev_qty)
            if avg_entry is None or held == 0:
                avg_entry = order.price
            else:
                avg_entry = (avg_entry * held + order.price * order.qty) / (held + order.qty)
            continue

        closed = min(abs(prev_qty), order.qty)
        if avg_entry is not None:
            per_unit = order.price - avg_entry if prev_qty > 0 else avg_entry - order.price
            realized += per_unit * closed

        if qty == 0:
            avg_entry = None
        elif (prev_qty > 0) != (qty > 0):
            avg_entry = order.price

    return Position(symbol=symbol, qty=qty, avg_entry=avg_entry, realized_pnl=realized)
