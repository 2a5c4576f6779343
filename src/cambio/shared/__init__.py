# src/cambio/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Read/write locking
- Logging configuration
"""

from cambio.shared.validators import parse_currency_list, validate_currency_code
from cambio.shared.rwlock import ReadWriteLock
from cambio.shared.logging_conf import setup_logging

__all__ = [
    "parse_currency_list",
    "validate_currency_code",
    "ReadWriteLock",
    "setup_logging",
]
