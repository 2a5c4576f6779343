# src/cambio/shared/rwlock.py
"""
Read/Write Lock - Shared Readers, Exclusive Writers

This module implements a small writer-preferring read/write lock on top of
threading.Condition. Any number of readers may hold the lock at once; a
writer waits for active readers to leave and blocks new readers while it
waits, so a reload is never starved by a steady stream of conversions.

Files that USE this module:
- cambio.application.rates_service (MemoryRateService guards its table)
- tests.test_rwlock (unit tests)

Files that this module USES:
- None (pure utility implementation)
"""
import threading
from contextlib import contextmanager
from typing import Iterator


class ReadWriteLock:
    """Writer-preferring read/write lock. Not reentrant."""

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    def acquire_read(self) -> None:
        """Block until no writer holds or waits for the lock, then enter as reader."""
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            if self._readers <= 0:
                raise RuntimeError("release_read() called without a matching acquire_read()")
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        """Block until the lock is free of readers and writers, then enter exclusively."""
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True

    def release_write(self) -> None:
        with self._cond:
            if not self._writer:
                raise RuntimeError("release_write() called without a matching acquire_write()")
            self._writer = False
            self._cond.notify_all()

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        """Context manager holding the lock in shared mode."""
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        """Context manager holding the lock in exclusive mode."""
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()

    @property
    def readers(self) -> int:
        """Number of readers currently holding the lock."""
        with self._cond:
            return self._readers

    @property
    def write_held(self) -> bool:
        """True while a writer holds the lock."""
        with self._cond:
            return self._writer
