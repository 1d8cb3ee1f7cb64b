"""Tests for the pre-trade risk gate."""

import pytest

from paper.config import PaperSettings
from paper.risk import OrderIntent, RejectReason, RiskConfig, RiskResult, pre_trade_check
from simcore.models import OrderSide


def intent(symbol="BTCUSDT", side=OrderSide.BUY, qty=0.01, price=50000.0) -> OrderIntent:
    return OrderIntent(symbol=symbol, side=side, qty=qty, price=price)


class TestPreTradeCheck:
    """Admission rules."""

    def test_no_constraints(self):
        assert pre_trade_check(RiskConfig(), intent(qty=1)) == RiskResult.accept()

    def test_under_max_notional(self):
        assert pre_trade_check(RiskConfig(max_notional=1000), intent()).ok

    def test_over_max_notional(self):
        result = pre_trade_check(RiskConfig(max_notional=100), intent())  # 500 notional

        assert not result.ok
        assert result.reason is RejectReason.MAX_NOTIONAL_EXCEEDED

    def test_notional_at_limit_passes(self):
        assert pre_trade_check(RiskConfig(max_notional=500), intent(qty=1, price=500)).ok

    def test_zero_limit_is_a_limit(self):
        result = pre_trade_check(RiskConfig(max_notional=0), intent())
        assert result.reason is RejectReason.MAX_NOTIONAL_EXCEEDED

    @pytest.mark.parametrize("qty, price", [(0, 50000), (1, 0)])
    def test_zero_notional_passes(self, qty, price):
        assert pre_trade_check(RiskConfig(max_notional=100), intent(qty=qty, price=price)).ok

    def test_symbol_not_allowed(self):
        config = RiskConfig(allowed_symbols=["BTCUSDT"])
        result = pre_trade_check(config, intent(symbol="DOGEUSDT"))

        assert result.reason is RejectReason.SYMBOL_NOT_ALLOWED

    def test_symbol_allowed(self):
        config = RiskConfig(allowed_symbols=["BTCUSDT", "ETHUSDT"])
        assert pre_trade_check(config, intent(symbol="ETHUSDT")).ok

    def test_notional_checked_before_symbol(self):
        config = RiskConfig(max_notional=100, allowed_symbols=["BTCUSDT"])
        result = pre_trade_check(config, intent(symbol="DOGEUSDT"))

        assert result.reason is RejectReason.MAX_NOTIONAL_EXCEEDED

    def test_max_qty(self):
        config = RiskConfig(max_position_qty=0.005)
        result = pre_trade_check(config, intent())

        assert result.reason is RejectReason.MAX_QTY_EXCEEDED

    def test_side_symmetric(self):
        config = RiskConfig(max_notional=100, allowed_symbols=["BTCUSDT"])
        for qty in (0.001, 0.01):
            buy = pre_trade_check(config, intent(side=OrderSide.BUY, qty=qty))
            sell = pre_trade_check(config, intent(side=OrderSide.SELL, qty=qty))
            assert buy == sell

    def test_repeatable(self):
        config = RiskConfig(max_notional=100)
        assert pre_trade_check(config, intent()) == pre_trade_check(config, intent())


class TestRiskResult:
    def test_truthiness(self):
        assert RiskResult.accept()
        assert not RiskResult.reject(RejectReason.SYMBOL_NOT_ALLOWED)

    def test_reason_values(self):
        assert RejectReason.MAX_NOTIONAL_EXCEEDED.value == "max_notional_exceeded"
        assert RejectReason.SYMBOL_NOT_ALLOWED.value == "symbol_not_allowed"


class TestRiskConfigFromSettings:
    def test_from_settings(self):
        settings = PaperSettings(
            max_notional_per_order=250,
            allowed_symbols="btcusdt, ETHUSDT,,",
            max_position_qty=None,
        )
        config = RiskConfig.from_settings(settings)

        assert config.max_notional == 250
        assert config.allowed_symbols == frozenset({"BTCUSDT", "ETHUSDT"})
        assert config.max_position_qty is None

    def test_empty_allowed_symbols_means_any(self):
        config = RiskConfig.from_settings(PaperSettings(allowed_symbols=""))
        assert config.allowed_symbols is None
        assert pre_trade_check(config, intent(symbol="ANYTHING")).ok
