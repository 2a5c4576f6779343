# tests/test_formatter.py
"""
Formatter Tests - Unit Tests for Plain Text Formatting

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- cambio.adapters.formatting.formatter (all formatter functions for testing)
- cambio.domain.models (ConversionResult, CacheStatus for test data)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from cambio.adapters.formatting.formatter import (
    _fmt_elapsed,  # Format elapsed time
    format_cache_status,  # Format cache status line
    format_conversion,  # Format a conversion result
    format_rate_table,  # Format a cross-rate table
)
from cambio.domain.models import CacheStatus, ConversionResult


class TestFormatRateTable:
    def test_sorted_lines(self):
        table = {"USD": {"EUR": 0.92, "BRL": 5.0}, "BRL": {"USD": 0.2}}

        result = format_rate_table(table, title="Rates")

        assert result == "\n".join([
            "Rates",
            "BRL: USD 0.2000",
            "USD: BRL 5.0000  EUR 0.9200",
        ])

    def test_custom_decimals(self):
        assert format_rate_table({"USD": {"BRL": 5.0}}, title="R", decimals=2) == "R\nUSD: BRL 5.00"

    def test_empty_row(self):
        assert format_rate_table({"USD": {}}, title="R") == "R\nUSD: N/A"

    @pytest.mark.parametrize("table", [None, {}])
    def test_no_rates(self, table):
        assert format_rate_table(table, title="R") == "R\n(no rates available)"


class TestFormatConversion:
    def test_conversion_line(self):
        result = ConversionResult(amount=1000.0, source="USD", target="BRL", converted=5000.0, rate=5.0)
        assert format_conversion(result) == "USD 1000.00 = BRL 5000.00 (rate 5.0000)"

    def test_rounding_is_presentation_only(self):
        result = ConversionResult(amount=1.0, source="USD", target="EUR", converted=0.923456, rate=0.923456)
        assert format_conversion(result, decimals=3) == "USD 1.000 = EUR 0.923 (rate 0.9235)"


class TestFormatCacheStatus:
    def test_empty(self):
        status = CacheStatus(available=False, captured_at=None, age_seconds=None, ttl_seconds=3600)
        assert format_cache_status(status) == "Cache empty"

    def test_fresh(self):
        status = CacheStatus(available=True, captured_at=1.0, age_seconds=720, ttl_seconds=3600)
        assert format_cache_status(status) == "Cache fresh (updated 12min ago, ttl 1h:00min)"

    def test_expired(self):
        status = CacheStatus(available=False, captured_at=1.0, age_seconds=9000, ttl_seconds=3600)
        assert format_cache_status(status) == "Cache expired (updated 2h:30min ago, ttl 1h:00min)"


class TestFmtElapsed:
    def test_minutes_only(self):
        assert _fmt_elapsed(300) == "5min"

    def test_hours_and_minutes(self):
        assert _fmt_elapsed(9720) == "2h:42min"

    def test_negative_is_clamped(self):
        assert _fmt_elapsed(-10) == "0min"
