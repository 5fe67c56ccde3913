"""Data models."""

from .base import BaseModel
from .envelope import Envelope
from .file_entry import FileEntry
from .search_task import SearchTask, SearchStatus
from .server_info import ServerInfo, VolumeInfo
from .session import Session, SessionState
from .share_link import ShareLink

__all__ = [
    "BaseModel", "Envelope", "FileEntry", "SearchTask", "SearchStatus",
    "ServerInfo", "VolumeInfo", "Session", "SessionState", "ShareLink"
]
