# src/cambio/__init__.py
"""
Cambio - Exchange Rate Acquisition, Caching and Conversion

Fetches exchange rates for a fixed set of currencies from a remote provider,
keeps a complete cross-rate table cached on disk (or loaded once in memory),
and converts amounts between currencies using the freshest available table.
"""

__version__ = "1.0.0"
