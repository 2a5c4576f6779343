# src/cambio/adapters/providers/__init__.py
"""
Provider Adapters - External API Clients

This package contains adapters for external exchange rate APIs.
All providers implement the RateProvider interface.
"""

from cambio.adapters.providers.base import RateProvider
from cambio.adapters.providers.fxrates import FxRatesProvider, decode_rates

__all__ = [
    "RateProvider",
    "FxRatesProvider",
    "decode_rates",
]
