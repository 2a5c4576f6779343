# src/cambio/application/rates_service.py
"""
Rates Service - Serving Rates and Conversions

This module contains the two policies for serving rates to callers:

- CachedRateService: cache-first. Answers from the durable TTL cache while
  it is fresh, otherwise refreshes through the fan-out aggregator and writes
  the result back. Losing the cache write never loses the answer.
- MemoryRateService: load-once. Fetches the table once at start-up and keeps
  it in memory behind a read/write lock until reload() or shutdown().

Both expose get_rates(), convert() and is_available().

Files that USE this module:
- cambio.app (composition root builds both services)
- tests.test_rates_service (unit tests)

Files that this module USES:
- cambio.application.aggregator (FanOutAggregator for refreshes)
- cambio.application.conversion (pure conversion engine)
- cambio.adapters.persistence.file_store (RateCacheStore for the durable cache)
- cambio.shared.rwlock (ReadWriteLock for the in-memory table)
- cambio.domain.* (models and errors)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Standard library logging
import time  # Load timestamps for the in-memory table
from typing import Optional, Protocol  # Type hints for optional values and protocols

from cambio.adapters.persistence.file_store import RateCacheStore  # Durable TTL cache
from cambio.application import conversion  # Pure conversion engine
from cambio.application.aggregator import FanOutAggregator  # Concurrent table assembly
from cambio.domain.currency import RateTable, copy_table
from cambio.domain.errors import (
    AggregateFetchError,
    CacheReadError,
    CacheWriteError,
    NotInitializedError,
    RatesUnavailableError,
)
from cambio.domain.models import CacheStatus, ConversionRequest, ConversionResult
from cambio.shared.rwlock import ReadWriteLock  # Shared readers, exclusive reloads

log = logging.getLogger(__name__)


class RateService(Protocol):
    """What callers (REST layer, displays) rely on."""
    def get_rates(self) -> RateTable:
        ...

    def convert(self, amount: float, source: str, target: str) -> ConversionResult:
        ...

    def is_available(self) -> bool:
        ...


def quote(table: RateTable, amount: float, source: str, target: str) -> ConversionResult:
    """
    Convert using a table and report the effective rate alongside the amount.

    Raises:
        InvalidAmountError: If amount is negative or not a finite number
        RateNotFoundError: If the pair is missing from the table
    """
    request = ConversionRequest(amount=amount, source=source, target=target)
    converted = conversion.convert(request.amount, request.source, request.target, table)
    return ConversionResult(
        amount=request.amount,
        source=request.source,
        target=request.target,
        converted=converted,
        rate=conversion.effective_rate(request.amount, converted),
    )


class CachedRateService:
    """
    Cache-first rate service backed by a durable TTL cache.
    """
    def __init__(self, aggregator: FanOutAggregator, store: RateCacheStore):
        """
        Initialize the service.

        Args:
            aggregator: Fetches complete tables from the provider
            store: Durable cache the tables are written through to
        """
        self.aggregator = aggregator
        self.store = store

    def _load_cached(self) -> Optional[RateTable]:
        """Fresh cached table, or None. An unreadable cache counts as a miss."""
        try:
            return self.store.load()
        except CacheReadError as e:
            log.warning("Cache unreadable, treating as miss: %s", e)
            return None

    def _write_through(self, table: RateTable) -> None:
        """Best-effort cache write; the caller keeps the table either way."""
        try:
            self.store.store(table)
        except CacheWriteError as e:
            log.warning("Failed to cache fresh rates, serving them uncached: %s", e)

    def get_rates(self) -> RateTable:
        """
        Return the cached table if fresh, otherwise refresh and cache it.

        Returns:
            Complete cross-rate table

        Raises:
            RatesUnavailableError: If there is no fresh cache and the refresh failed
        """
        table = self._load_cached()
        if table is not None:
            return table

        log.info("No fresh cached rates, refreshing from provider")
        try:
            table = self.aggregator.fetch_all()
        except AggregateFetchError as e:
            log.error("No cached rates and refresh failed: %s", e)
            raise RatesUnavailableError(f"No cached rates and refresh failed: {e}") from e

        self._write_through(table)
        return table

    def get_cached_rates(self) -> RateTable:
        """
        Return the cached table without ever contacting the provider.

        Raises:
            RatesUnavailableError: If the cache is absent or expired
        """
        table = self._load_cached()
        if table is None:
            raise RatesUnavailableError("Cached rates are not available or expired")
        return table

    def force_refresh(self) -> RateTable:
        """
        Re-fetch and re-cache regardless of cache freshness.

        Raises:
            AggregateFetchError: If the provider could not deliver a complete table
        """
        log.info("Forcing rate refresh")
        table = self.aggregator.fetch_all()
        self._write_through(table)
        return table

    def convert(self, amount: float, source: str, target: str) -> ConversionResult:
        """
        Convert using the freshest available rates.

        Raises:
            RatesUnavailableError: If no rates could be obtained
            RateNotFoundError: If the pair is missing
            InvalidAmountError: If the amount is invalid
        """
        return quote(self.get_rates(), amount, source, target)

    def invalidate_cache(self) -> None:
        """
        Drop the durable cache; the next get_rates() refreshes.

        Raises:
            CacheWriteError: If the cache file cannot be removed
        """
        self.store.invalidate()

    def is_available(self) -> bool:
        """True if fresh cached rates exist. Never fetches."""
        return self._load_cached() is not None

    def status(self) -> CacheStatus:
        return self.store.status()


class MemoryRateService:
    """
    Load-once rate service holding the table in process memory.

    Lifecycle: initialize() -> many reads -> optional reload() -> shutdown().
    Reads share the lock; initialize()/reload() hold it exclusively.
    """
    def __init__(self, aggregator: FanOutAggregator):
        self.aggregator = aggregator
        self._lock = ReadWriteLock()
        self._table: Optional[RateTable] = None
        self._loaded_at: Optional[float] = None

    def initialize(self) -> None:
        """
        Load the table once. Calling again after success is a no-op.

        Raises:
            AggregateFetchError: If the initial load failed
        """
        with self._lock.write_locked():
            if self._table is not None:
                log.info("Rates already loaded in memory")
                return
            log.info("Loading rates into memory")
            self._table = self._fetch()
            self._loaded_at = time.time()
            log.info("Rates loaded for %d currencies", len(self._table))

    def reload(self) -> None:
        """
        Re-fetch the table unconditionally. On failure the previous table stays.

        Raises:
            AggregateFetchError: If the reload failed
        """
        with self._lock.write_locked():
            log.info("Reloading rates into memory")
            self._table = self._fetch()
            self._loaded_at = time.time()
            log.info("Rates reloaded for %d currencies", len(self._table))

    def _fetch(self) -> RateTable:
        try:
            return self.aggregator.fetch_all()
        except AggregateFetchError as e:
            log.error("Failed to load rates into memory: %s", e)
            raise

    def shutdown(self) -> None:
        """Drop the table; reads fail until initialize() runs again."""
        with self._lock.write_locked():
            self._table = None
            self._loaded_at = None
        log.info("In-memory rates released")

    def get_rates(self) -> RateTable:
        """
        Return a copy of the in-memory table.

        Raises:
            NotInitializedError: If initialize() has not succeeded
        """
        with self._lock.read_locked():
            if self._table is None:
                raise NotInitializedError()
            return copy_table(self._table)

    def convert(self, amount: float, source: str, target: str) -> ConversionResult:
        """
        Convert using the in-memory table.

        Raises:
            NotInitializedError: If initialize() has not succeeded
            RateNotFoundError: If the pair is missing
            InvalidAmountError: If the amount is invalid
        """
        with self._lock.read_locked():
            if self._table is None:
                raise NotInitializedError()
            return quote(self._table, amount, source, target)

    def is_available(self) -> bool:
        with self._lock.read_locked():
            return self._table is not None

    @property
    def loaded_at(self) -> Optional[float]:
        """Unix time of the last successful load, if any."""
        with self._lock.read_locked():
            return self._loaded_at
