# src/cambio/adapters/__init__.py
"""
Adapters Layer - External Interfaces

This package contains all adapters for external systems:
- Providers (rate API)
- Persistence (cache storage)
- Formatting (text output)
"""

__all__ = []
