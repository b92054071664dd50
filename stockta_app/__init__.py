"""
StockTA App - Technical Indicator Calculation Engine

Deterministic indicator engine for daily stock price history. Turns a
finite OHLCV series into moving averages, oscillators, momentum histograms,
volatility bands, retracement levels, crossover signals and zones,
divergence events and period extrema.
"""

__version__ = "0.1.0"
__author__ = "StockTA Team"
