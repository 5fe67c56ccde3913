#!/usr/bin/env python3
"""Sharing link model."""

from datetime import datetime
from typing import Dict, Any, Optional
from models.base import BaseModel


class ShareLink(BaseModel):
    """A link returned by ``SYNO.FileStation.Sharing``."""

    def _parse_data(self, data: Dict[str, Any]):
        self.path = data.get("path", "")
        self.url = data.get("url", "")
        self.expire_time = data.get("expire_time")
        self.date_expired = data.get("date_expired", "")

    @property
    def expires_at(self) -> Optional[str]:
        """Expiration as text, or None if the link never expires."""
        if isinstance(self.expire_time, (int, float)) and self.expire_time > 0:
            return datetime.fromtimestamp(self.expire_time).strftime("%Y-%m-%d %H:%M:%S")
        if self.date_expired:
            return str(self.date_expired)
        return None
