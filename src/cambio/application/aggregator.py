# src/cambio/application/aggregator.py
"""
Fan-Out Aggregator - Concurrent Cross-Rate Table Assembly

Fetches the rates of every configured base currency concurrently and
assembles them into one cross-rate table. The result is all-or-nothing: if
any single fetch fails, the whole operation fails with the first error
observed and nothing fetched so far is returned.

Every task is joined before the outcome is decided, so no fetch is left
running in the background when fetch_all() returns.

Files that USE this module:
- cambio.application.rates_service (both services refresh through FanOutAggregator)
- cambio.app (builds the aggregator from settings)
- tests.test_aggregator (unit tests)

Files that this module USES:
- cambio.adapters.providers.base (RateProvider interface)
- cambio.shared.validators (supported code checks)
- cambio.domain.errors (FetchError, AggregateFetchError, UnsupportedCurrencyError)
"""
from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor, wait
from typing import Iterable, List, Optional, Tuple

from cambio.adapters.providers.base import RateProvider
from cambio.domain.currency import RateRow, RateTable, normalize_code
from cambio.domain.errors import AggregateFetchError, FetchError, UnsupportedCurrencyError
from cambio.shared.validators import validate_currency_code

log = logging.getLogger(__name__)

MAX_WORKERS = 5


def filter_row(base: str, row: RateRow, currencies: Iterable[str]) -> RateRow:
    """
    Keep only rates towards configured currencies other than the base itself.

    Args:
        base: Base currency of the row
        row: Rates as returned by the provider
        currencies: Configured currency codes

    Returns:
        New filtered RateRow
    """
    wanted = set(currencies)
    return {code: rate for code, rate in row.items() if code in wanted and code != base}


class FanOutAggregator:
    """Builds a complete cross-rate table from one provider."""

    def __init__(self, provider: RateProvider, currencies: Iterable[str],
                 max_workers: int = MAX_WORKERS):
        """
        Initialize the aggregator.

        Args:
            provider: Provider used for every per-currency fetch
            currencies: Configured currency set, also the default bases
            max_workers: Upper bound on concurrent fetches (1 fetches sequentially)

        Raises:
            UnsupportedCurrencyError: If a configured code is not supported
            ValueError: If no currency is configured or max_workers < 1
        """
        self.provider = provider
        self.currencies: Tuple[str, ...] = self._validated(currencies)
        if not self.currencies:
            raise ValueError("At least one currency must be configured")
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self.max_workers = max_workers

    @staticmethod
    def _validated(codes: Iterable[str]) -> Tuple[str, ...]:
        out: List[str] = []
        for raw in codes:
            code = normalize_code(raw)
            if not validate_currency_code(code):
                raise UnsupportedCurrencyError(code)
            if code not in out:
                out.append(code)
        return tuple(out)

    def fetch_all(self, bases: Optional[Iterable[str]] = None) -> RateTable:
        """
        Fetch every base concurrently and assemble the cross-rate table.

        Args:
            bases: Base currencies to fetch (defaults to the configured set)

        Returns:
            base -> RateRow for every requested base

        Raises:
            AggregateFetchError: If any per-currency fetch failed (first error wins)
            UnsupportedCurrencyError: If a requested base is not supported
        """
        targets = self._validated(bases) if bases is not None else self.currencies
        if not targets:
            return {}

        table: RateTable = {}
        errors: List[FetchError] = []
        lock = threading.Lock()

        def task(base: str) -> None:
            try:
                row = self.provider.fetch(base)
            except FetchError as e:
                with lock:
                    errors.append(e)
                return
            filtered = filter_row(base, row, self.currencies)
            with lock:
                table[base] = filtered

        workers = min(self.max_workers, len(targets))
        log.info("Fetching rates for %s (%d workers)", ", ".join(targets), workers)
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="cambio-fetch") as pool:
            futures = [pool.submit(task, base) for base in targets]
            wait(futures)

        # surface unexpected (non-fetch) exceptions raised inside a task
        for future in futures:
            future.result()

        if errors:
            first = errors[0]
            log.error("Rate fan-out failed, discarding %d partial rows: %s", len(table), first)
            raise AggregateFetchError(first) from first

        log.info("Fetched complete rate table for %d currencies", len(table))
        return table
