# src/cambio/adapters/persistence/file_store.py
"""
File Store - Durable TTL Cache for the Cross-Rate Table

This module persists one complete cross-rate table to a JSON file together
with its capture time and time-to-live. The record survives process
restarts and is fully overwritten on every refresh.

A stale record is never deleted by load(); it simply stops being returned
until the next store() or invalidate().

Files that USE this module:
- cambio.application.rates_service (CachedRateService reads and writes through RateCacheStore)
- cambio.app (builds the store from settings)
- tests.test_file_store (unit tests)

Files that this module USES:
- cambio.config (settings for cache file and TTL)
- cambio.domain.errors (CacheReadError, CacheWriteError)
- cambio.domain.models (CacheStatus)
"""
from __future__ import annotations

import json
import logging
import os
import shutil
import tempfile
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional, Union

from cambio.config import settings
from cambio.domain.currency import RateTable, copy_table
from cambio.domain.errors import CacheReadError, CacheWriteError
from cambio.domain.models import CacheStatus

log = logging.getLogger(__name__)


@dataclass
class CacheRecord:
    captured_at: int  # unix seconds
    ttl_seconds: int
    table: RateTable = field(default_factory=dict)

    def to_json(self) -> dict:
        """
        Convert CacheRecord to a JSON-serializable dictionary.

        Returns:
            Dictionary with captured_at, ttl_seconds and table
        """
        return {
            "captured_at": self.captured_at,
            "ttl_seconds": self.ttl_seconds,
            "table": copy_table(self.table),
        }

    @staticmethod
    def from_json(data: dict) -> "CacheRecord":
        """
        Create CacheRecord from a JSON dictionary.

        Args:
            data: Dictionary as written by to_json

        Returns:
            CacheRecord instance

        Raises:
            KeyError, TypeError, ValueError: If the dictionary is not a valid record
        """
        raw_table = data["table"]
        if not isinstance(raw_table, dict):
            raise TypeError("table must be an object")
        table: RateTable = {}
        for base, row in raw_table.items():
            if not isinstance(row, dict):
                raise TypeError(f"row for {base} must be an object")
            table[str(base)] = {str(k): float(v) for k, v in row.items()}
        return CacheRecord(
            captured_at=int(data["captured_at"]),
            ttl_seconds=int(data["ttl_seconds"]),
            table=table,
        )

    def age_seconds(self, now: float) -> float:
        return now - self.captured_at

    def is_fresh(self, now: float) -> bool:
        return self.age_seconds(now) <= self.ttl_seconds


class RateCacheStore:
    """JSON file cache holding a single CacheRecord."""

    def __init__(self, path: Optional[Union[str, Path]] = None, ttl_seconds: Optional[int] = None,
                 clock: Callable[[], float] = time.time):
        """
        Initialize the cache store.

        Args:
            path: Cache file (defaults to settings.cache_file)
            ttl_seconds: TTL stamped on stored records (defaults to settings.cache_ttl_seconds)
            clock: Returns the current unix time; injectable for tests
        """
        self.path = Path(path) if path is not None else settings.cache_file
        self.ttl_seconds = ttl_seconds if ttl_seconds is not None else settings.cache_ttl_seconds
        if self.ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self._clock = clock

    def _backup_corrupt(self, reason: Exception) -> None:
        """Move an unreadable cache file aside so the next store() starts clean."""
        backup_path = self.path.with_suffix(self.path.suffix + ".corrupt")
        try:
            shutil.copy2(self.path, backup_path)
            self.path.unlink()
            log.warning("Cache file corrupted, backed up to %s: %s", backup_path, reason)
        except OSError as backup_error:
            log.error("Failed to back up corrupt cache file %s: %s", self.path, backup_error)

    def peek(self) -> Optional[CacheRecord]:
        """
        Read the stored record regardless of freshness.

        Returns:
            CacheRecord, or None if absent or corrupt

        Raises:
            CacheReadError: If the file exists but cannot be read
        """
        # A concurrent invalidate() can remove the file at any point; missing is a miss
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as e:
            log.error("Failed to read cache file %s: %s", self.path, e)
            raise CacheReadError(f"Failed to read cache file {self.path}: {e}") from e

        try:
            data = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            self._backup_corrupt(e)
            return None

        try:
            return CacheRecord.from_json(data)
        except (KeyError, ValueError, TypeError) as e:
            self._backup_corrupt(e)
            return None

    def load(self) -> Optional[RateTable]:
        """
        Return the cached table if it is still within its TTL.

        Returns:
            A copy of the cached table, or None if absent, corrupt or expired

        Raises:
            CacheReadError: If the file exists but cannot be read
        """
        record = self.peek()
        if record is None:
            log.debug("No cached rates at %s", self.path)
            return None

        now = self._clock()
        if not record.is_fresh(now):
            log.info("Cached rates expired (age=%ds, ttl=%ds)",
                     record.age_seconds(now), record.ttl_seconds)
            return None

        log.debug("Using cached rates (age=%ds)", record.age_seconds(now))
        return copy_table(record.table)

    def store(self, table: RateTable) -> CacheRecord:
        """
        Persist a new record stamped with the current time, replacing the old one.

        Uses temporary file + atomic rename so readers never see a partial file.

        Args:
            table: Complete cross-rate table

        Returns:
            The record that was written

        Raises:
            CacheWriteError: If the file cannot be written
        """
        record = CacheRecord(
            captured_at=int(self._clock()),
            ttl_seconds=self.ttl_seconds,
            table=copy_table(table),
        )

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            temp_fd, temp_path = tempfile.mkstemp(
                suffix=".json.tmp",
                dir=str(self.path.parent),
                text=True,
            )
        except OSError as e:
            log.error("Failed to prepare cache file %s: %s", self.path, e)
            raise CacheWriteError(f"Failed to save cache file: {e}") from e

        try:
            with os.fdopen(temp_fd, "w", encoding="utf-8") as f:
                json.dump(record.to_json(), f, ensure_ascii=False, indent=2)
                f.flush()
                os.fsync(f.fileno())
            os.replace(temp_path, str(self.path))
        except OSError as e:
            try:
                os.unlink(temp_path)
            except OSError:
                pass
            log.error("Failed to write cache file %s: %s", self.path, e)
            raise CacheWriteError(f"Failed to save cache file: {e}") from e

        log.info("Cached rates for %d currencies (ttl=%ds)", len(record.table), record.ttl_seconds)
        return record

    def invalidate(self) -> None:
        """
        Remove the cache file. Removing an absent cache is not an error.

        Raises:
            CacheWriteError: If the file exists but cannot be removed
        """
        try:
            self.path.unlink()
        except FileNotFoundError:
            return
        except OSError as e:
            log.error("Failed to remove cache file %s: %s", self.path, e)
            raise CacheWriteError(f"Failed to clear cache file: {e}") from e
        log.info("Cache cleared: %s", self.path)

    def status(self) -> CacheStatus:
        """
        Describe the stored record without fetching anything.

        Returns:
            CacheStatus; an unreadable file is reported as unavailable
        """
        try:
            record = self.peek()
        except CacheReadError:
            record = None
        if record is None:
            return CacheStatus(available=False, captured_at=None, age_seconds=None,
                               ttl_seconds=self.ttl_seconds)
        now = self._clock()
        return CacheStatus(
            available=record.is_fresh(now),
            captured_at=float(record.captured_at),
            age_seconds=record.age_seconds(now),
            ttl_seconds=record.ttl_seconds,
        )
