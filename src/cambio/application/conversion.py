# src/cambio/application/conversion.py
"""
Conversion Engine - Pure Rate Lookup and Multiplication

Converts amounts between currencies given a cross-rate table. No I/O, no
mutation and no locking, so it is safe to call from any thread.

Files that USE this module:
- cambio.application.rates_service (both services convert through here)
- tests.test_conversion (unit tests)

Files that this module USES:
- cambio.domain.errors (RateNotFoundError)
"""
from __future__ import annotations

from typing import Mapping

from cambio.domain.currency import normalize_code
from cambio.domain.errors import RateNotFoundError


def convert(amount: float, source: str, target: str,
            table: Mapping[str, Mapping[str, float]]) -> float:
    """
    Convert an amount from one currency to another.

    Same-currency conversions return the amount unchanged without looking at
    the table. No rounding is applied.

    Args:
        amount: Amount in the source currency
        source: Currency to convert from
        target: Currency to convert to
        table: base -> (target -> rate)

    Returns:
        amount * table[source][target]

    Raises:
        RateNotFoundError: If the pair is missing from the table
    """
    source = normalize_code(source)
    target = normalize_code(target)
    if source == target:
        return amount

    row = table.get(source)
    if row is None or target not in row:
        raise RateNotFoundError(source, target)
    return amount * row[target]


def effective_rate(amount: float, converted: float) -> float:
    """Rate implied by a conversion; 0.0 for a zero amount."""
    if amount == 0:
        return 0.0
    return converted / amount
