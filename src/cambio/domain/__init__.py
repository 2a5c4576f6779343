# src/cambio/domain/__init__.py
"""
Domain Layer - Pure Business Objects

This package contains currency definitions, value objects and the error
hierarchy. No dependencies on infrastructure or external systems.
"""

from cambio.domain.currency import (
    SUPPORTED_CODES,
    Currency,
    RateRow,
    RateTable,
    copy_table,
    normalize_code,
)
from cambio.domain.errors import (
    AggregateFetchError,
    CacheError,
    CacheReadError,
    CacheWriteError,
    CambioError,
    DecodeError,
    EmptyRatesError,
    FetchError,
    HTTPStatusError,
    InvalidAmountError,
    NetworkError,
    NotInitializedError,
    ProviderResultError,
    RateNotFoundError,
    RatesUnavailableError,
    ServiceError,
    UnsupportedCurrencyError,
    ValidationError,
)
from cambio.domain.models import CacheStatus, ConversionRequest, ConversionResult

__all__ = [
    "Currency",
    "SUPPORTED_CODES",
    "RateRow",
    "RateTable",
    "copy_table",
    "normalize_code",
    "ConversionRequest",
    "ConversionResult",
    "CacheStatus",
    "CambioError",
    "FetchError",
    "NetworkError",
    "HTTPStatusError",
    "DecodeError",
    "EmptyRatesError",
    "ProviderResultError",
    "AggregateFetchError",
    "CacheError",
    "CacheReadError",
    "CacheWriteError",
    "RateNotFoundError",
    "ServiceError",
    "NotInitializedError",
    "RatesUnavailableError",
    "ValidationError",
    "UnsupportedCurrencyError",
    "InvalidAmountError",
]
