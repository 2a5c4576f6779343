# src/cambio/domain/models.py
"""
Domain Models - Pure Business Objects

This module contains the value objects passed between the rate services and
their callers:
- Conversion requests and results
- Cache status reports

Files that USE this module:
- cambio.application.rates_service (builds requests and results)
- cambio.adapters.persistence.file_store (builds CacheStatus)
- cambio.adapters.formatting.formatter (renders results and status)
- tests.* (tests use domain models for test data)

Files that this module USES:
- cambio.domain.currency (code normalization)
- cambio.domain.errors (InvalidAmountError)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import math  # Finite checks for amounts
from dataclasses import dataclass  # Decorator for creating data classes
from datetime import datetime, timezone  # Date/time utilities for timestamps
from typing import Any, Optional  # Type hints for optional values

from cambio.domain.currency import normalize_code
from cambio.domain.errors import InvalidAmountError


def _valid_amount(value: Any) -> bool:
    """True if value is a finite, non-negative number (bools excluded)."""
    if isinstance(value, bool):
        return False
    try:
        num = float(value)
    except (TypeError, ValueError):
        return False
    return math.isfinite(num) and num >= 0


@dataclass(frozen=True)
class ConversionRequest:
    """
    A single conversion to perform.

    Codes are normalized (stripped, upper-cased) but not checked against the
    supported set: an unknown code surfaces as a missing rate.

    Attributes:
        amount: Non-negative amount in the source currency
        source: Currency to convert from
        target: Currency to convert to
    """
    amount: float
    source: str
    target: str

    def __post_init__(self) -> None:
        if not _valid_amount(self.amount):
            raise InvalidAmountError(self.amount)
        object.__setattr__(self, "amount", float(self.amount))
        object.__setattr__(self, "source", normalize_code(self.source))
        object.__setattr__(self, "target", normalize_code(self.target))


@dataclass(frozen=True)
class ConversionResult:
    """
    Outcome of a conversion.

    Attributes:
        amount: Original amount
        source: Source currency code
        target: Target currency code
        converted: Amount expressed in the target currency (unrounded)
        rate: Effective rate (converted / amount, 0.0 when amount is 0)
    """
    amount: float
    source: str
    target: str
    converted: float
    rate: float


@dataclass(frozen=True)
class CacheStatus:
    """
    Snapshot of the durable cache, computed without fetching.

    Attributes:
        available: True if a fresh table is stored
        captured_at: Unix seconds of the stored record, if any
        age_seconds: Seconds since captured_at, if any
        ttl_seconds: TTL the record was stored with (or the store default)
    """
    available: bool
    captured_at: Optional[float]
    age_seconds: Optional[float]
    ttl_seconds: int

    @property
    def captured_at_datetime(self) -> Optional[datetime]:
        """captured_at as an aware UTC datetime."""
        if self.captured_at is None:
            return None
        return datetime.fromtimestamp(self.captured_at, tz=timezone.utc)
