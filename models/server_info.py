#!/usr/bin/env python3
"""Server and storage volume models."""

from typing import Dict, Any, List, Tuple
from models.base import BaseModel


class ServerInfo(BaseModel):
    """File Station information from ``SYNO.FileStation.Info``."""

    def _parse_data(self, data: Dict[str, Any]):
        self.hostname = data.get("hostname", "Unknown")
        self.version = data.get("version", "Unknown")
        self.time = data.get("time")
        self._protocols = data.get("support_virtual_protocol", {})

    @property
    def protocols(self) -> List[Tuple[str, bool]]:
        """Virtual file system support as (name, supported) pairs.

        DSM versions report either a mapping of protocol to flag or a plain
        list of the supported protocol names.
        """
        if isinstance(self._protocols, dict):
            return [(str(name), bool(flag)) for name, flag in self._protocols.items()]
        if isinstance(self._protocols, list):
            return [(str(name), True) for name in self._protocols]
        return []


class VolumeInfo(BaseModel):
    """A storage volume from ``SYNO.FileStation.Volume``."""

    def _parse_data(self, data: Dict[str, Any]):
        self.name = data.get("name", "")
        self.status = data.get("status", "Unknown")
        self.filesystem = data.get("filesystem", "Unknown")
        self.total_size = _as_int(data.get("total_size"))
        self.free_size = _as_int(data.get("free_size"))

    @property
    def used_size(self) -> int:
        return max(self.total_size - self.free_size, 0)

    @property
    def used_percent(self) -> int:
        if self.total_size <= 0:
            return 0
        return round(self.used_size / self.total_size * 100)


def _as_int(value: Any) -> int:
    # DSM returns sizes as strings on some endpoints
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0
