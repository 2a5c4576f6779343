# src/cambio/adapters/formatting/__init__.py
"""
Formatting Adapters - Plain Text Output

Renders rate tables, conversions and cache status for displays.
"""

from cambio.adapters.formatting.formatter import (
    format_cache_status,
    format_conversion,
    format_rate_table,
)

__all__ = [
    "format_rate_table",
    "format_conversion",
    "format_cache_status",
]
