"""Pre-trade risk gate.

``pre_trade_check`` is a pure admission function: it never raises and
never looks at order history. Checks run in a fixed order and the first
failure wins:

1. notional (qty * price) strictly above ``max_notional``
2. symbol outside ``allowed_symbols``
3. qty strictly above ``max_position_qty``

Side does not affect the outcome.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from simcore.models import OrderSide

if TYPE_CHECKING:
    from paper.config import PaperSettings

logger = logging.getLogger(__name__)


class RejectReason(str, Enum):
    """Why an order intent was rejected."""

    MAX_NOTIONAL_EXCEEDED = "max_notional_exceeded"
    SYMBOL_NOT_ALLOWED = "symbol_not_allowed"
    MAX_QTY_EXCEEDED = "max_qty_exceeded"


class RiskConfig(BaseModel):
    """Risk limits. ``None`` means no constraint."""

    model_config = ConfigDict(frozen=True)

    max_notional: float | None = None  # quote currency per order
    allowed_symbols: frozenset[str] | None = None
    max_position_qty: float | None = None  # base units per order

    @classmethod
    def from_settings(cls, settings: "PaperSettings") -> "RiskConfig":
        return cls(
            max_notional=settings.max_notional_per_order,
            allowed_symbols=settings.allowed_symbol_set,
            max_position_qty=settings.max_position_qty,
        )


class OrderIntent(BaseModel):
    """An order a caller wants to place, before admission."""

    model_config = ConfigDict(frozen=True)

    symbol: str
    side: OrderSide
    qty: float
    price: float

    @property
    def notional(self) -> float:
        return self.qty * self.price


class RiskResult(BaseModel):
    """Outcome of a risk check: ok, or rejected with a reason."""

    model_config = ConfigDict(frozen=True)

    ok: bool
    reason: RejectReason | None = None

    @classmethod
    def accept(cls) -> "RiskResult":
        return cls(ok=True)

    @classmethod
    def reject(cls, reason: RejectReason) -> "RiskResult":
        return cls(ok=False, reason=reason)

    def __bool__(self) -> bool:
        return self.ok


def pre_trade_check(config: RiskConfig, intent: OrderIntent) -> RiskResult:
    """Validate ``intent`` against ``config``.

    Args:
        config: Risk limits
        intent: Order to validate

    Returns:
        RiskResult.accept() or RiskResult.reject(reason)
    """
    notional = intent.notional
    if config.max_notional is not None and notional > config.max_notional:
        logger.info(
            "Risk reject %s %s: notional %.8f > max %.8f",
            intent.side.value,
            intent.symbol,
            notional,
            config.max_notional,
        )
        return RiskResult.reject(RejectReason.MAX_NOTIONAL_EXCEEDED)

    if config.allowed_symbols is not None and intent.symbol not in config.allowed_symbols:
        logger.info("Risk reject %s %s: symbol not allowed", intent.side.value, intent.symbol)
        return RiskResult.reject(RejectReason.SYMBOL_NOT_ALLOWED)

    if config.max_position_qty is not None and intent.qty > config.max_position_qty:
        logger.info(
            "Risk reject %s %s: qty %.8f > max %.8f",
            intent.side.value,
            intent.symbol,
            intent.qty,
            config.max_position_qty,
        )
        return RiskResult.reject(RejectReason.MAX_QTY_EXCEEDED)

    return RiskResult.accept()
