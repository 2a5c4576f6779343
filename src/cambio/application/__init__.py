# src/cambio/application/__init__.py
"""
Application Layer - Use Cases and Services

This package contains the conversion engine, the fan-out aggregator and the
rate services that orchestrate them. I/O happens through adapters.
"""

from cambio.application.aggregator import FanOutAggregator, filter_row
from cambio.application.conversion import convert, effective_rate
from cambio.application.rates_service import (
    CachedRateService,
    MemoryRateService,
    RateService,
    quote,
)

__all__ = [
    "FanOutAggregator",
    "filter_row",
    "convert",
    "effective_rate",
    "CachedRateService",
    "MemoryRateService",
    "RateService",
    "quote",
]
