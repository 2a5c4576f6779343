# src/cambio/adapters/formatting/formatter.py
"""
Text Formatter - Plain Text Presentation of Rates

This module renders rate tables, conversion results and cache status as
plain text for status displays and logs. Rounding happens here, never in
the conversion engine.

Files that USE this module:
- cambio.app (logs the loaded table and sample conversions)
- tests.test_formatter (unit tests)

Files that this module USES:
- cambio.domain.models (ConversionResult, CacheStatus)
"""
from __future__ import annotations

from typing import Mapping, Optional

from cambio.domain.models import CacheStatus, ConversionResult


def format_rate_table(table: Optional[Mapping[str, Mapping[str, float]]],
                      title: str = "Exchange rates", decimals: int = 4) -> str:
    """
    Format a cross-rate table, one line per base currency.

    Bases and targets are sorted so the output is stable.

    Args:
        table: base -> (target -> rate), or None when no rates are loaded
        title: Heading line
        decimals: Decimal places per rate (default: 4)

    Returns:
        Multi-line string like "USD: BRL 5.0000  EUR 0.9200"
    """
    if not table:
        return f"{title}\n(no rates available)"

    lines = [title]
    for base in sorted(table):
        row = table[base]
        if row:
            rates = "  ".join(f"{code} {row[code]:.{decimals}f}" for code in sorted(row))
        else:
            rates = "N/A"
        lines.append(f"{base}: {rates}")
    return "\n".join(lines)


def format_conversion(result: ConversionResult, decimals: int = 2) -> str:
    """
    Format a conversion as '<SRC> <amount> = <DST> <converted> (rate <rate>)'.

    Args:
        result: Conversion outcome
        decimals: Decimal places for amounts (default: 2)

    Returns:
        Single formatted line
    """
    return (
        f"{result.source} {result.amount:.{decimals}f} = "
        f"{result.target} {result.converted:.{decimals}f} "
        f"(rate {result.rate:.4f})"
    )


def _fmt_elapsed(seconds: int) -> str:
    """
    Format elapsed time as 'Xh:YYmin' or 'Ymin'.

    Args:
        seconds: Elapsed time in seconds (will be clamped to >= 0)

    Returns:
        Formatted string like '2h:42min' or '5min'
    """
    if seconds < 0:
        seconds = 0
    minutes = seconds // 60
    hours = minutes // 60
    mins_only = minutes % 60
    if hours > 0:
        return f"{hours}h:{mins_only:02d}min"
    return f"{mins_only}min"


def format_cache_status(status: CacheStatus) -> str:
    """
    Describe the durable cache in one line.

    Args:
        status: Cache status report

    Returns:
        e.g. 'Cache fresh (updated 12min ago, ttl 60min)' or 'Cache empty'
    """
    if status.captured_at is None or status.age_seconds is None:
        return "Cache empty"
    state = "fresh" if status.available else "expired"
    age = _fmt_elapsed(int(status.age_seconds))
    ttl = _fmt_elapsed(int(status.ttl_seconds))
    return f"Cache {state} (updated {age} ago, ttl {ttl})"
