# tests/test_app.py
"""
Application Wiring Tests - Settings and Service Factories

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- cambio.config (Settings)
- cambio.app (service factories)
- unittest.mock (Mock provider)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from unittest.mock import Mock  # Mock provider

from cambio.app import build_aggregator, build_cached_service, build_memory_service
from cambio.config import Settings


class TestSettings:
    def test_defaults(self):
        cfg = Settings()
        assert cfg.currencies == ("USD", "EUR", "BRL", "GBP", "JPY")
        assert cfg.cache_ttl_seconds == 3600
        assert cfg.http_timeout_seconds == 15

    def test_currency_list_is_normalized(self):
        cfg = Settings(CAMBIO_CURRENCIES=" usd, eur,USD ")
        assert cfg.currencies == ("USD", "EUR")

    def test_unsupported_currency_rejected(self):
        with pytest.raises(ValueError):
            Settings(CAMBIO_CURRENCIES="USD,XYZ")

    def test_empty_currency_list_rejected(self):
        with pytest.raises(ValueError):
            Settings(CAMBIO_CURRENCIES=" , ")

    def test_provider_url_must_be_http(self):
        with pytest.raises(ValueError):
            Settings(CAMBIO_PROVIDER_URL="ftp://rates.example.com")

    def test_ttl_must_be_positive(self):
        with pytest.raises(ValueError):
            Settings(CACHE_TTL_SECONDS=0)

    def test_log_level_is_normalized(self):
        assert Settings(LOG_LEVEL=" debug ").log_level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValueError):
            Settings(LOG_LEVEL="chatty")


class TestFactories:
    def test_build_aggregator(self):
        cfg = Settings(CAMBIO_CURRENCIES="USD,BRL", FANOUT_MAX_WORKERS=2)
        provider = Mock()

        aggregator = build_aggregator(cfg, provider)

        assert aggregator.currencies == ("USD", "BRL")
        assert aggregator.max_workers == 2
        assert aggregator.provider is provider

    def test_build_cached_service(self, tmp_path):
        cfg = Settings(CACHE_FILE=str(tmp_path / "rates.json"), CACHE_TTL_SECONDS=60)
        provider = Mock()
        provider.fetch.side_effect = lambda base: {"USD": 1.0, "EUR": 0.9, "BRL": 5.0, "GBP": 0.8, "JPY": 150.0}

        service = build_cached_service(cfg, provider)
        table = service.get_rates()

        assert set(table) == {"USD", "EUR", "BRL", "GBP", "JPY"}
        assert table["USD"] == {"EUR": 0.9, "BRL": 5.0, "GBP": 0.8, "JPY": 150.0}
        assert service.store.ttl_seconds == 60
        assert (tmp_path / "rates.json").exists()

    def test_build_memory_service(self):
        cfg = Settings(CAMBIO_CURRENCIES="USD,BRL")
        provider = Mock()
        provider.fetch.side_effect = lambda base: {"USD": 0.2} if base == "BRL" else {"BRL": 5.0}

        service = build_memory_service(cfg, provider)
        service.initialize()

        assert service.convert(10, "BRL", "USD").converted == 2.0
        assert provider.fetch.call_count == 2
