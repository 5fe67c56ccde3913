#!/usr/bin/env python3
"""File Station file and folder models."""

from typing import Dict, Any, Optional
from models.base import BaseModel


class FileEntry(BaseModel):
    """A file or folder returned by ``SYNO.FileStation.List`` or ``Search``."""

    def _parse_data(self, data: Dict[str, Any]):
        self.name = data.get("name", "")
        self.path = data.get("path", "")
        self.is_dir = bool(data.get("isdir", False))
        # getinfo reports a missing path as an entry carrying an error code
        self.code: Optional[int] = data.get("code")

    @property
    def type_marker(self) -> str:
        return "[DIR]" if self.is_dir else "[FILE]"

    @property
    def exists(self) -> bool:
        return self.code is None
