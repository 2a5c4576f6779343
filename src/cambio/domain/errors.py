# src/cambio/domain/errors.py
"""
Domain Errors - Exchange Rate Exceptions

This module defines the exception hierarchy for rate acquisition, caching,
conversion and the rate services. Every exception derives from CambioError
so callers can catch the whole family at once.
"""
from typing import Optional


class CambioError(Exception):
    """Base exception for all cambio errors."""
    pass


# --- Fetch layer (one per base currency) ---

class FetchError(CambioError):
    """Raised when rates for a single base currency cannot be fetched."""

    def __init__(self, currency: str, message: str):
        super().__init__(f"{currency}: {message}")
        self.currency = currency


class NetworkError(FetchError):
    """Transport failure or timeout talking to the provider."""
    pass


class HTTPStatusError(FetchError):
    """Provider answered with a status other than 200."""

    def __init__(self, currency: str, status_code: int):
        super().__init__(currency, f"provider returned HTTP {status_code}")
        self.status_code = status_code


class DecodeError(FetchError):
    """Response body matched neither known payload shape."""
    pass


class EmptyRatesError(FetchError):
    """Response decoded but carried no usable rates."""
    pass


class ProviderResultError(FetchError):
    """Enveloped response reported a non-success result."""

    def __init__(self, currency: str, result: str):
        super().__init__(currency, f"provider returned result {result!r}")
        self.result = result


# --- Fan-out layer ---

class AggregateFetchError(CambioError):
    """Raised when any per-currency fetch of a fan-out fails."""

    def __init__(self, cause: FetchError):
        super().__init__(f"Failed to fetch rates for {cause.currency}: {cause}")
        self.currency = cause.currency
        self.cause = cause


# --- Storage layer ---

class CacheError(CambioError):
    """Base exception for cache storage failures."""
    pass


class CacheReadError(CacheError):
    """Cache file exists but could not be read."""
    pass


class CacheWriteError(CacheError):
    """Cache file could not be written or removed."""
    pass


# --- Conversion layer ---

class RateNotFoundError(CambioError):
    """Requested currency pair is missing from the rate table."""

    def __init__(self, source: str, target: str):
        super().__init__(f"Exchange rate not found for {source} -> {target}")
        self.source = source
        self.target = target


# --- Service layer ---

class ServiceError(CambioError):
    """Base exception for rate service failures."""
    pass


class NotInitializedError(ServiceError):
    """Load-once service used before initialize() succeeded."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "Rates not loaded, call initialize() first")


class RatesUnavailableError(ServiceError):
    """No usable cached rates and a refresh was not possible or failed."""
    pass


# --- Validation ---

class ValidationError(CambioError):
    """Base exception for invalid input."""
    pass


class UnsupportedCurrencyError(ValidationError):
    """Currency code is not part of the supported set."""

    def __init__(self, code: str):
        super().__init__(f"Unsupported currency code: {code!r}")
        self.code = code


class InvalidAmountError(ValidationError):
    """Amount is negative, not finite or not a number."""

    def __init__(self, amount):
        super().__init__(f"Invalid amount: {amount!r}")
        self.amount = amount
