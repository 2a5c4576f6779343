# src/cambio/app.py
"""
Application Entry Point - Service Wiring and Warm-up

This module is the composition root: it wires settings into the provider,
aggregator, cache store and both rate services. Running it warms the
load-once service, logs the rate table and a few sample conversions.

Files that USE this module:
- python -m cambio.app (module entry point)
- tests.test_app (factory wiring tests)

Files that this module USES:
- cambio.shared.logging_conf (setup_logging for logging configuration)
- cambio.config (settings for configuration management)
- cambio.adapters.providers.fxrates (FxRatesProvider)
- cambio.adapters.persistence.file_store (RateCacheStore)
- cambio.application.* (FanOutAggregator and the rate services)
- cambio.adapters.formatting.formatter (text output)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Standard library for logging messages and errors
import sys  # System-specific parameters and functions for exit codes
from typing import Optional  # Type hints for optional values

from cambio.adapters.formatting.formatter import format_conversion, format_rate_table
from cambio.adapters.persistence.file_store import RateCacheStore
from cambio.adapters.providers.base import RateProvider
from cambio.adapters.providers.fxrates import FxRatesProvider
from cambio.application.aggregator import FanOutAggregator
from cambio.application.rates_service import CachedRateService, MemoryRateService
from cambio.config import Settings, settings as default_settings
from cambio.domain.errors import CambioError
from cambio.shared.logging_conf import setup_logging

logger = logging.getLogger(__name__)

SAMPLE_CONVERSIONS = (
    (1000.0, "USD", "BRL"),
    (500.0, "EUR", "BRL"),
    (100.0, "BRL", "USD"),
    (1000.0, "GBP", "JPY"),
)


def build_aggregator(cfg: Optional[Settings] = None,
                     provider: Optional[RateProvider] = None) -> FanOutAggregator:
    """Aggregator over the configured currencies and provider."""
    cfg = cfg if cfg is not None else default_settings
    provider = provider or FxRatesProvider(
        base_url=cfg.provider_url, timeout=cfg.http_timeout_seconds
    )
    return FanOutAggregator(provider, cfg.currencies, max_workers=cfg.fanout_max_workers)


def build_cached_service(cfg: Optional[Settings] = None,
                         provider: Optional[RateProvider] = None) -> CachedRateService:
    """Cache-first service writing through to the configured cache file."""
    cfg = cfg if cfg is not None else default_settings
    store = RateCacheStore(cfg.cache_file, ttl_seconds=cfg.cache_ttl_seconds)
    return CachedRateService(build_aggregator(cfg, provider), store)


def build_memory_service(cfg: Optional[Settings] = None,
                         provider: Optional[RateProvider] = None) -> MemoryRateService:
    """Load-once service; call initialize() before use."""
    return MemoryRateService(build_aggregator(cfg, provider))


def main() -> int:
    """
    Warm the load-once service and log the table plus sample conversions.

    Returns:
        Process exit code (0 on success, 1 if rates could not be loaded)
    """
    cfg = default_settings
    setup_logging(
        level=cfg.log_level,
        log_file=cfg.log_file,
        max_bytes=cfg.log_max_bytes,
        backup_count=cfg.log_backup_count,
        log_stdout=cfg.log_stdout,
    )

    service = build_memory_service(cfg)
    try:
        service.initialize()
    except CambioError as e:
        logger.error("Failed to load rates: %s", e)
        return 1

    logger.info("\n%s", format_rate_table(service.get_rates(), title="Loaded exchange rates"))
    for amount, source, target in SAMPLE_CONVERSIONS:
        try:
            result = service.convert(amount, source, target)
        except CambioError as e:
            logger.warning("Conversion %s->%s failed: %s", source, target, e)
            continue
        logger.info("%s", format_conversion(result))

    service.shutdown()
    return 0


if __name__ == "__main__":
    sys.exit(main())
