"""Candle data source for backtesting.

Reads Binance kline CSV dumps (data.binance.vision layout):

    <root>/<SYMBOL>/<INTERVAL>/*.csv

Columns: open_time, open, high, low, close, volume, close_time, ...
Header rows are skipped. Open times are converted to epoch seconds.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Protocol

from simcore.models import Candle

logger = logging.getLogger(__name__)

# Binance switched spot dumps from milliseconds to microseconds in 2025
_MICROS_THRESHOLD = 10**14
_MILLIS_THRESHOLD = 10**11


class CandleSource(Protocol):
    """Protocol for candle data access."""

    def load(self, symbol: str, interval: str) -> list[Candle]: ...


def _to_seconds(open_time: int) -> int:
    if open_time >= _MICROS_THRESHOLD:
        return open_time // 1_000_000
    if open_time >= _MILLIS_THRESHOLD:
        return open_time // 1000
    return open_time


def parse_row(row: list[str]) -> Candle | None:
    """Parse one CSV row, or None for headers and short rows."""
    if len(row) < 6:
        return None
    try:
        open_time = int(float(row[0]))
        return Candle(
            ts=_to_seconds(open_time),
            open=float(row[1]),
            high=float(row[2]),
            low=float(row[3]),
            close=float(row[4]),
            volume=float(row[5]),
        )
    except ValueError:
        return None


def load_csv(path: str | Path) -> list[Candle]:
    """Load candles from a single CSV file, in file order."""
    candles: list[Candle] = []
    skipped = 0
    with open(path, newline="") as f:
        for row in csv.reader(f):
            if not row:
                continue
            candle = parse_row(row)
            if candle is None:
                skipped += 1
                continue
            candles.append(candle)
    if skipped:
        logger.debug("%s: skipped %d non-data rows", path, skipped)
    return candles


class CsvCandleSource:
    """Load candles from a directory tree of Binance kline CSV files."""

    def __init__(self, root: str | Path):
        self.root = Path(root)

    def directory(self, symbol: str, interval: str) -> Path:
        return self.root / symbol.upper() / interval

    def load(self, symbol: str, interval: str) -> list[Candle]:
        """Load every CSV for symbol/interval, sorted by ts ascending.

        Raises:
            FileNotFoundError: If the symbol/interval directory does not exist.
        """
        directory = self.directory(symbol, interval)
        if not directory.is_dir():
            raise FileNotFoundError(f"Data not found: {directory}")

        candles: list[Candle] = []
        files = sorted(directory.glob("*.csv"))
        for path in files:
            candles.extend(load_csv(path))

        candles.sort(key=lambda c: c.ts)
        logger.info(
            "Loaded %d candles for %s %s from %d files",
            len(candles),
            symbol.upper(),
            interval,
            len(files),
        )
        return candles
