"""EMA cross + RSI filter strategy configuration."""

from pydantic import BaseModel, Field, model_validator

EMA_CROSS_RSI_STRATEGY_NAME = "ema_cross_rsi"


class EmaCrossRsiConfig(BaseModel):
    """Configuration for the EMA cross + RSI filter strategy."""

    fast_period: int = Field(default=20, gt=0)
    slow_period: int = Field(default=50, gt=0)
    rsi_period: int = Field(default=14, gt=0)

    # Entries only when momentum confirms the cross
    rsi_entry_min: float = Field(default=50.0, ge=0, le=100)

    @model_validator(mode="after")
    def _fast_below_slow(self) -> "EmaCrossRsiConfig":
        if self.fast_period >= self.slow_period:
            raise ValueError("fast_period must be smaller than slow_period")
        return self
