# src/cambio/shared/validators.py
"""
Input Validation Utilities - Currency Codes

This module provides the currency validation helpers shared by configuration
and the application layer: supported-code checks and parsing of comma
separated currency lists.

Files that USE this module:
- cambio.config.settings (parse_currency_list in the currencies validator)
- cambio.application.aggregator (rejects unsupported base codes)

Files that this module USES:
- cambio.domain.currency (the supported currency set and normalization)
"""
from typing import Any, List

from cambio.domain.currency import SUPPORTED_CODES, normalize_code


def validate_currency_code(code: Any) -> bool:
    """
    Check whether a code belongs to the supported currency set.

    Args:
        code: Currency code to validate (case-insensitive)

    Returns:
        True if supported, False otherwise
    """
    return normalize_code(code) in SUPPORTED_CODES


def parse_currency_list(raw: str) -> List[str]:
    """
    Parse a comma separated list of currency codes.

    Duplicates are dropped, keeping the first occurrence.

    Args:
        raw: Text like "USD, eur,BRL"

    Returns:
        List of normalized codes

    Raises:
        ValueError: If the list is empty or contains an unsupported code
    """
    codes: List[str] = []
    for part in str(raw or "").split(","):
        code = normalize_code(part)
        if not code:
            continue
        if code not in SUPPORTED_CODES:
            raise ValueError(f"Unsupported currency code: {code}")
        if code not in codes:
            codes.append(code)
    if not codes:
        raise ValueError("At least one currency code must be configured")
    return codes
