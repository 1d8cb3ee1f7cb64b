"""Tests for CSV candle loading and the backtest CLI."""

import json

import pytest

from backtest.__main__ import main
from backtest.candle_source import CsvCandleSource, load_csv, parse_row

HEADER = "open_time,open,high,low,close,volume,close_time,quote_volume,count,taker_buy_volume,taker_buy_quote_volume,ignore\n"


def kline_line(open_time: int, close: float) -> str:
    return f"{open_time},{close},{close + 1},{close - 1},{close},12.5,{open_time + 59999},0,0,0,0,0\n"


@pytest.fixture
def data_dir(tmp_path):
    """Two monthly files for BTCUSDT 1m, written out of order."""
    directory = tmp_path / "BTCUSDT" / "1m"
    directory.mkdir(parents=True)
    base = 1_700_000_000_000
    (directory / "BTCUSDT-1m-2023-12.csv").write_text(
        HEADER + "".join(kline_line(base + (i + 30) * 60_000, 130 - i) for i in range(30))
    )
    (directory / "BTCUSDT-1m-2023-11.csv").write_text(
        "".join(kline_line(base + i * 60_000, 100 + i) for i in range(30))
    )
    return tmp_path


class TestParseRow:
    def test_milliseconds(self):
        candle = parse_row(["1700000000000", "1", "2", "0.5", "1.5", "10"])

        assert candle.ts == 1_700_000_000
        assert (candle.open, candle.high, candle.low, candle.close, candle.volume) == (1, 2, 0.5, 1.5, 10)

    def test_microseconds(self):
        assert parse_row(["1735689600000000", "1", "1", "1", "1", "1"]).ts == 1_735_689_600

    def test_header_and_short_rows(self):
        assert parse_row(HEADER.strip().split(",")) is None
        assert parse_row(["1", "2"]) is None


class TestCsvCandleSource:
    def test_load_sorted_across_files(self, data_dir):
        candles = CsvCandleSource(data_dir).load("btcusdt", "1m")

        assert len(candles) == 60
        assert [c.ts for c in candles] == sorted(c.ts for c in candles)
        assert candles[0].close == 100
        assert candles[-1].close == 101

    def test_missing_directory(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            CsvCandleSource(tmp_path).load("ETHUSDT", "1h")

    def test_load_csv_skips_header(self, data_dir):
        candles = load_csv(data_dir / "BTCUSDT" / "1m" / "BTCUSDT-1m-2023-12.csv")
        assert len(candles) == 30


class TestCli:
    def test_run_and_save_json(self, data_dir, tmp_path):
        output = tmp_path / "result.json"
        code = main([
            "--symbol", "btcusdt",
            "--interval", "1m",
            "--data-dir", str(data_dir),
            "--fast", "3",
            "--slow", "8",
            "--rsi-period", "5",
            "--initial-equity", "1000",
            "--output", str(output),
        ])

        assert code == 0
        data = json.loads(output.read_text())
        assert data["metadata"]["symbol"] == "BTCUSDT"
        assert data["metadata"]["candles"] == 60
        assert data["overall"]["initial_equity"] == 1000
        assert len(data["equity_curve"]) == 60

    def test_bollinger_strategy(self, data_dir):
        code = main([
            "--symbol", "BTCUSDT",
            "--interval", "1m",
            "--data-dir", str(data_dir),
            "--strategy", "bollinger_reversion",
            "--period", "10",
            "--k", "1.5",
        ])
        assert code == 0

    def test_missing_data(self, tmp_path):
        assert main(["--symbol", "BTCUSDT", "--data-dir", str(tmp_path)]) == 1

    def test_invalid_strategy_parameters(self, data_dir):
        code = main([
            "--symbol", "BTCUSDT",
            "--interval", "1m",
            "--data-dir", str(data_dir),
            "--fast", "50",
            "--slow", "20",
        ])
        assert code == 1
