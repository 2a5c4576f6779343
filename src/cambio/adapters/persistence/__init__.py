# src/cambio/adapters/persistence/__init__.py
"""
Persistence Adapters - Data Storage

This package contains adapters for persisting data:
- File-based TTL cache for the cross-rate table (JSON)
"""

from cambio.adapters.persistence.file_store import CacheRecord, RateCacheStore

__all__ = [
    "CacheRecord",
    "RateCacheStore",
]
