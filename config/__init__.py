"""Configuration management."""

from .settings import ConfigManager, APIConfig, SearchConfig, UsageError

__all__ = ["ConfigManager", "APIConfig", "SearchConfig", "UsageError"]
