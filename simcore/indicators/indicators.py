"""Technical indicators for strategy decisions.

All functions take an ordered price series and return a list of floats of
exactly the same length. Entries inside an indicator's warm-up window are
``nan``.

Warm-up is NOT uniform across indicators:
- sma / stddev / bollinger_bands: ``nan`` until a full window is available
- rsi: ``nan`` until ``period`` price deltas are available
- ema: no warm-up, seeded with the first value
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Literal, NamedTuple, Sequence

import numpy as np

RsiSmoothing = Literal["simple", "wilder"]


def _check_period(period: int) -> None:
    if period <= 0:
        raise ValueError(f"period must be positive, got {period}")


def _to_array(series: Sequence[float]) -> np.ndarray:
    return np.asarray(series, dtype=np.float64)


def sma(series: Sequence[float], period: int) -> list[float]:
    """
    Calculate Simple Moving Average.

    Args:
        series: Sequence of price values
        period: SMA period

    Returns:
        List of SMA values (same length as input, NaN for the first period-1)
    """
    _check_period(period)
    arr = _to_array(series)
    result = np.full(len(arr), np.nan)

    for i in range(period - 1, len(arr)):
        result[i] = np.mean(arr[i - period + 1 : i + 1])

    return result.tolist()


def ema(series: Sequence[float], period: int) -> list[float]:
    """
    Calculate Exponential Moving Average.

    Seeded with the first value, so there is no NaN warm-up
    (unlike sma and bollinger_bands).

    Args:
        series: Sequence of price values
        period: EMA period, smoothing factor k = 2 / (period + 1)

    Returns:
        List of EMA values (same length as input)
    """
    _check_period(period)
    arr = _to_array(series)
    if len(arr) == 0:
        return []

    k = 2.0 / (period + 1)
    result = np.empty_like(arr)
    result[0] = arr[0]

    for i in range(1, len(arr)):
        result[i] = arr[i] * k + result[i - 1] * (1 - k)

    return result.tolist()


def _rsi_value(avg_gain: float, avg_loss: float) -> float:
    if avg_gain == 0:
        return 0.0
    if avg_loss == 0:
        return 100.0
    return 100.0 - 100.0 / (1.0 + avg_gain / avg_loss)


def rsi(
    series: Sequence[float],
    period: int,
    smoothing: RsiSmoothing = "simple",
) -> list[float]:
    """
    Calculate Relative Strength Index.

    With ``smoothing="simple"`` each value averages the gains and losses of
    the trailing ``period`` deltas. ``smoothing="wilder"`` seeds with the
    same simple average and then applies Wilder's recursive smoothing.

    Boundary rules: 0 when the average gain is 0, 100 when the average loss
    is 0 and the average gain is positive.

    Args:
        series: Sequence of price values
        period: Number of deltas per average
        smoothing: "simple" (default) or "wilder"

    Returns:
        List of RSI values in [0, 100] (NaN for the first ``period`` entries)
    """
    _check_period(period)
    if smoothing not in ("simple", "wilder"):
        raise ValueError(f"unknown RSI smoothing: {smoothing!r}")

    arr = _to_array(series)
    result = np.full(len(arr), np.nan)
    if len(arr) <= period:
        return result.tolist()

    deltas = np.diff(arr)
    gains = np.clip(deltas, 0.0, None)
    losses = np.clip(-deltas, 0.0, None)

    # deltas[j - 1] is series[j] - series[j - 1]
    avg_gain = float(np.mean(gains[:period]))
    avg_loss = float(np.mean(losses[:period]))
    result[period] = _rsi_value(avg_gain, avg_loss)

    for i in range(period + 1, len(arr)):
        if smoothing == "wilder":
            avg_gain = (avg_gain * (period - 1) + gains[i - 1]) / period
            avg_loss = (avg_loss * (period - 1) + losses[i - 1]) / period
        else:
            avg_gain = float(np.mean(gains[i - period : i]))
            avg_loss = float(np.mean(losses[i - period : i]))
        result[i] = _rsi_value(avg_gain, avg_loss)

    return result.tolist()


def stddev(series: Sequence[float], period: int) -> list[float]:
    """Population standard deviation over the same trailing window as sma."""
    _check_period(period)
    arr = _to_array(series)
    result = np.full(len(arr), np.nan)

    for i in range(period - 1, len(arr)):
        result[i] = np.std(arr[i - period + 1 : i + 1])

    return result.tolist()


class BandPoint(NamedTuple):
    """Bollinger band values at a single index."""

    middle: float
    upper: float
    lower: float


@dataclass(frozen=True)
class BollingerBands:
    """Bollinger bands as three parallel series."""

    middle: list[float]
    upper: list[float]
    lower: list[float]

    def __len__(self) -> int:
        return len(self.middle)

    def __getitem__(self, index: int) -> BandPoint:
        return BandPoint(self.middle[index], self.upper[index], self.lower[index])

    def points(self) -> Iterator[BandPoint]:
        """Iterate per-index (middle, upper, lower) points."""
        for i in range(len(self.middle)):
            yield self[i]


def bollinger_bands(series: Sequence[float], period: int, k: float) -> BollingerBands:
    """
    Calculate Bollinger Bands.

    middle = sma(period), upper/lower = middle +/- k * stddev over the
    same window. Whenever defined and the window is not flat,
    upper > middle > lower (for k > 0).

    Args:
        series: Sequence of price values
        period: Window length
        k: Standard deviation multiplier

    Returns:
        BollingerBands with NaN in all three series during warm-up
    """
    middle = sma(series, period)
    deviation = stddev(series, period)

    upper: list[float] = []
    lower: list[float] = []
    for m, s in zip(middle, deviation):
        if math.isnan(m) or math.isnan(s):
            upper.append(math.nan)
            lower.append(math.nan)
        else:
            upper.append(m + k * s)
            lower.append(m - k * s)

    return BollingerBands(middle=middle, upper=upper, lower=lower)
