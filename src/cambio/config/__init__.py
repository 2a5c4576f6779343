# src/cambio/config/__init__.py
"""
Configuration Module

Provides centralized configuration management using Pydantic Settings.
Values come from environment variables or an optional .env file.
"""

from cambio.config.settings import Settings, settings

__all__ = ["Settings", "settings"]
