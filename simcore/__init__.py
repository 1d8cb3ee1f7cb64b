"""Core simulation logic: indicators, models, and strategies.

This package contains pure business logic with no I/O dependencies
(no files, databases, or network access). It is shared between the
backtesting system (backtest/) and the paper trading layer (paper/).
"""
