"""Bollinger band mean-reversion strategy configuration."""

from pydantic import BaseModel, Field

BOLLINGER_REVERSION_STRATEGY_NAME = "bollinger_reversion"


class BollingerReversionConfig(BaseModel):
    """Configuration for the Bollinger band mean-reversion strategy."""

    period: int = Field(default=20, gt=0)
    k: float = Field(default=2.0, gt=0)
