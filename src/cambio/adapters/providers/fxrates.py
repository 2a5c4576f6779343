# src/cambio/adapters/providers/fxrates.py
"""
FX Rates API Provider for Per-Currency Exchange Rates

This module implements the client for the remote rate provider. One call
fetches the rates of a single base currency. The provider answers in one of
two JSON shapes, both modelled with pydantic:

- simplified: {"rates": {...}} optionally with "result"/"base_code"
- enveloped:  {"result": "success", "time_last_update_unix": ...,
               "base_code": "USD", "conversion_rates": {...}}

The simplified shape is tried first; the enveloped one is the fallback.
There is no caching and no retry here, a failed call raises immediately.

Files that USE this module:
- cambio.app (builds the provider for both rate services)
- tests.test_providers (unit tests)

Files that this module USES:
- cambio.adapters.providers.base (RateProvider interface)
- cambio.config (settings for provider URL and HTTP timeout)
- cambio.domain.errors (fetch error taxonomy)
"""
from __future__ import annotations

import logging
import math
from typing import Any, Dict, Optional

import requests
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from cambio.adapters.providers.base import RateProvider
from cambio.config import settings
from cambio.domain.currency import RateRow, normalize_code
from cambio.domain.errors import (
    DecodeError,
    EmptyRatesError,
    HTTPStatusError,
    NetworkError,
    ProviderResultError,
)

log = logging.getLogger(__name__)

SUCCESS_RESULT = "success"


class SimpleRatesPayload(BaseModel):
    """Simplified response shape: a flat currency -> rate mapping."""
    model_config = ConfigDict(extra="ignore")

    result: Optional[str] = None
    base_code: Optional[str] = None
    rates: Dict[str, Any] = Field(default_factory=dict)


class EnvelopedRatesPayload(BaseModel):
    """Enveloped response shape with status, timestamps and conversion_rates."""
    model_config = ConfigDict(extra="ignore")

    result: str = ""
    documentation: Optional[str] = None
    terms_of_use: Optional[str] = None
    time_last_update_unix: Optional[int] = None
    time_last_update_utc: Optional[str] = None
    time_next_update_unix: Optional[int] = None
    time_next_update_utc: Optional[str] = None
    base_code: Optional[str] = None
    conversion_rates: Dict[str, Any] = Field(default_factory=dict)


def _usable_rates(rates: Dict[str, Any]) -> RateRow:
    """
    Keep only finite, positive multipliers under normalized codes.

    Entries that are null, non-numeric or booleans are dropped one by one so
    a single bad value never discards the rest of the row.
    """
    out: RateRow = {}
    for code, value in rates.items():
        if isinstance(value, bool):
            continue
        try:
            num = float(value)
        except (TypeError, ValueError):
            log.debug("Skipping unusable rate %r for %s", value, code)
            continue
        if not math.isfinite(num) or num <= 0:
            continue
        out[normalize_code(code)] = num
    return out


def decode_rates(base: str, data: Any) -> RateRow:
    """
    Decode a provider payload into a RateRow.

    Args:
        base: Base currency the payload was requested for (for error context)
        data: Parsed JSON body

    Returns:
        Non-empty RateRow

    Raises:
        DecodeError: If neither shape validates
        ProviderResultError: If the enveloped shape reports a non-success result
        EmptyRatesError: If a shape validates but holds no usable rates
    """
    try:
        simple = SimpleRatesPayload.model_validate(data)
    except ValidationError as e:
        log.debug("Simplified shape rejected for %s: %s", base, e)
    else:
        rates = _usable_rates(simple.rates)
        if rates:
            return rates

    try:
        enveloped = EnvelopedRatesPayload.model_validate(data)
    except ValidationError as e:
        log.error("Provider payload for %s matched no known shape: %s", base, e)
        raise DecodeError(base, "response matched no known payload shape") from e

    if enveloped.result and enveloped.result != SUCCESS_RESULT:
        log.error("Provider returned result=%r for %s", enveloped.result, base)
        raise ProviderResultError(base, enveloped.result)

    rates = _usable_rates(enveloped.conversion_rates)
    if rates:
        return rates

    log.error("Provider response for %s holds no usable rates", base)
    raise EmptyRatesError(base, "response holds no usable rates")


class FxRatesProvider(RateProvider):
    def __init__(self, base_url: Optional[str] = None, timeout: Optional[int] = None,
                 session: Optional[requests.Session] = None):
        """
        Initialize the rate provider client.

        Args:
            base_url: Optional endpoint URL (defaults to settings.provider_url)
            timeout: Optional HTTP timeout in seconds (defaults to settings.http_timeout_seconds)
            session: Optional requests session; module-level requests.get is used otherwise

        Raises:
            ValueError: If the URL is empty
        """
        self.url = base_url or settings.provider_url
        if not self.url:
            raise ValueError("Provider URL is not configured (CAMBIO_PROVIDER_URL).")
        self.timeout = timeout or settings.http_timeout_seconds
        self.session = session

    def _get(self, base: str) -> requests.Response:
        getter = self.session.get if self.session is not None else requests.get
        return getter(self.url, params={"base": base}, timeout=self.timeout)

    def fetch(self, base: str) -> RateRow:
        """
        Fetch the rates of one base currency.

        Args:
            base: Base currency code (e.g. "USD")

        Returns:
            Target code -> positive multiplier, as reported by the provider

        Raises:
            NetworkError: On timeout or transport failure
            HTTPStatusError: If the provider answers with a status other than 200
            DecodeError: If the body is not JSON or matches no known shape
            ProviderResultError: If the provider reports a non-success result
            EmptyRatesError: If the response holds no usable rates
        """
        base = normalize_code(base)
        try:
            log.info("Fetching %s rates from %s", base, self.url)
            resp = self._get(base)
        except requests.exceptions.Timeout as e:
            log.warning("Provider timeout after %d seconds for %s", self.timeout, base)
            raise NetworkError(base, f"timeout after {self.timeout}s") from e
        except requests.exceptions.RequestException as e:
            log.warning("Provider request failed for %s: %s", base, e)
            raise NetworkError(base, f"request failed: {e}") from e

        if resp.status_code != 200:
            log.error("Provider returned HTTP %d for %s", resp.status_code, base)
            raise HTTPStatusError(base, resp.status_code)

        # requests' JSONDecodeError is both a ValueError and a RequestException
        try:
            data = resp.json()
        except ValueError as e:
            log.error("Provider returned invalid JSON for %s: %s", base, e)
            raise DecodeError(base, f"invalid JSON: {e}") from e
        except requests.exceptions.RequestException as e:
            log.warning("Reading provider response failed for %s: %s", base, e)
            raise NetworkError(base, f"reading response failed: {e}") from e

        rates = decode_rates(base, data)
        log.info("Fetched %d rates for %s", len(rates), base)
        return rates
