"""Technical indicators (pure math, no I/O)."""

from simcore.indicators.indicators import (
    BandPoint,
    BollingerBands,
    bollinger_bands,
    ema,
    rsi,
    sma,
    stddev,
)

__all__ = [
    "BandPoint",
    "BollingerBands",
    "bollinger_bands",
    "ema",
    "rsi",
    "sma",
    "stddev",
]
