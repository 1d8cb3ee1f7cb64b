"""Strategy plugin system.

Public API:
- Strategy: Protocol that all strategies must implement
- BaseStrategy: Base class with a no-op init hook
- register_strategy: Decorator to register a strategy class
- create_strategy: Factory function to instantiate strategies by name
- list_strategies: Discover all registered strategies
- get_strategy_class: Get strategy class by name without instantiating

Importing this package auto-registers all built-in strategies.
"""

from simcore.strategy.protocol import BaseStrategy, Strategy
from simcore.strategy.registry import (
    create_strategy,
    get_strategy_class,
    list_strategies,
    register_strategy,
)

# Import built-in strategies to trigger auto-registration
import simcore.strategy.ema_cross_rsi  # noqa: F401,E402
import simcore.strategy.bollinger_reversion  # noqa: F401,E402

__all__ = [
    "BaseStrategy",
    "Strategy",
    "create_strategy",
    "get_strategy_class",
    "list_strategies",
    "register_strategy",
]
