# src/cambio/domain/currency.py
"""
Currency Codes and Rate Types

Defines the fixed set of supported currencies and the type aliases used for
rate rows and cross-rate tables throughout the package.

Files that USE this module:
- cambio.shared.validators (supported code checks)
- cambio.domain.models (type aliases)
- cambio.application.* (type aliases)
- cambio.adapters.* (type aliases)

Files that this module USES:
- None (pure domain layer, no external dependencies)
"""
from __future__ import annotations

from enum import Enum
from typing import Dict, FrozenSet


class Currency(str, Enum):
    """Supported currency codes."""
    USD = "USD"
    EUR = "EUR"
    BRL = "BRL"
    GBP = "GBP"
    JPY = "JPY"

    def __str__(self) -> str:
        return self.value


SUPPORTED_CODES: FrozenSet[str] = frozenset(c.value for c in Currency)

# target code -> multiplier; the base currency itself is never a key
RateRow = Dict[str, float]
# base code -> RateRow
RateTable = Dict[str, RateRow]


def copy_table(table: RateTable) -> RateTable:
    """Return a copy of a rate table that shares no dicts with the original."""
    return {base: dict(row) for base, row in table.items()}


def normalize_code(code) -> str:
    """Upper-cased, stripped code for lookups ("" for None)."""
    if code is None:
        return ""
    return str(getattr(code, "value", code)).strip().upper()
