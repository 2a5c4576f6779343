# src/cambio/adapters/providers/base.py
"""
Base Provider Interface for Exchange Rate Providers

This module defines the abstract base class for rate providers. A provider
fetches the rates of one base currency against every other currency it
knows about and normalizes them into a RateRow.

Files that USE this module:
- cambio.adapters.providers.fxrates (FxRatesProvider implements RateProvider)
- cambio.application.aggregator (fans out over a RateProvider)

Files that this module USES:
- cambio.domain.currency (RateRow type)
"""
from abc import ABC, abstractmethod

from cambio.domain.currency import RateRow


class RateProvider(ABC):
    @abstractmethod
    def fetch(self, base: str) -> RateRow:
        """
        Return target code -> multiplier for one base currency.

        Raises a cambio.domain.errors.FetchError subclass on failure.
        """
        raise NotImplementedError
