"""Paper trading: pre-trade risk gate, order store, and position ledger.

Usage:
    store = OrderStore()
    service = PaperTradingService(store, RiskConfig.from_settings(get_paper_settings()))
    result = service.submit({"symbol": "btcusdt", "side": "buy", "qty": 0.01, "price": 50000})
"""

from paper.config import PaperSettings, get_paper_settings
from paper.ledger import OrderStore, compute_position
from paper.risk import OrderIntent, RejectReason, RiskConfig, RiskResult, pre_trade_check
from paper.service import (
    LedgerSnapshot,
    OrderResult,
    PaperOrderRequest,
    PaperTradingService,
    RiskRejected,
)

__all__ = [
    "LedgerSnapshot",
    "OrderIntent",
    "OrderResult",
    "OrderStore",
    "PaperOrderRequest",
    "PaperSettings",
    "PaperTradingService",
    "RejectReason",
    "RiskConfig",
    "RiskRejected",
    "RiskResult",
    "compute_position",
    "get_paper_settings",
    "pre_trade_check",
]
