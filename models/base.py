#!/usr/bin/env python3
"""Base model classes for the MCP server."""

from typing import Dict, Any
from abc import ABC, abstractmethod


class BaseModel(ABC):
    """Base class for models parsed from DSM JSON payloads."""

    def __init__(self, data: Dict[str, Any]):
        self._raw_data = data
        self._parse_data(data)

    @abstractmethod
    def _parse_data(self, data: Dict[str, Any]):
        """Parse the raw data into model attributes."""
        pass

    @classmethod
    def from_list(cls, items: Any) -> list:
        """Parse a list of payload dicts, skipping anything that is not a dict."""
        if not isinstance(items, list):
            return []
        return [cls(item) for item in items if isinstance(item, dict)]
