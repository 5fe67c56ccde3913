#!/usr/bin/env python3
"""File Station API client implementation."""

from typing import List
from api.auth_api import SessionManager
from api.errors import RemoteCallError
from config.logging_setup import get_logger
from models.envelope import Envelope
from models.file_entry import FileEntry
from models.server_info import ServerInfo, VolumeInfo
from models.share_link import ShareLink

logger = get_logger(__name__)


class FileStationAPIClient:
    """Client for the ``SYNO.FileStation.*`` APIs used by the tools."""

    def __init__(self, session_manager: SessionManager):
        self.session_manager = session_manager

    async def list_folder(self, folder_path: str) -> List[FileEntry]:
        """Fetch the entries of a folder, in the order the NAS returns them."""
        envelope = await self.session_manager.request(
            "SYNO.FileStation.List", 2, "list", params={"folder_path": folder_path},
        )
        data = envelope.raise_for_error(f"Failed to list {folder_path}")
        entries = FileEntry.from_list(data.get("files", []))
        logger.debug(f"Listed {len(entries)} entries in {folder_path}")
        return entries

    async def get_info(self, path: str) -> FileEntry:
        envelope = await self.session_manager.request(
            "SYNO.FileStation.List", 2, "getinfo", params={"path": path},
        )
        data = envelope.raise_for_error(f"File not found or cannot be accessed: {path}")
        entries = FileEntry.from_list(data.get("files", []))
        if not entries or not entries[0].exists:
            code = entries[0].code if entries else None
            raise RemoteCallError(f"File not found or cannot be accessed: {path}", code=code)
        return entries[0]

    async def read_file(self, path: str) -> str:
        """Return the content of a file as text."""
        info = await self.get_info(path)
        if info.is_dir:
            raise RemoteCallError(f"{path} is a folder, not a file")

        result = await self.session_manager.download(
            "SYNO.FileStation.Download", 2, "download", params={"path": path, "mode": "open"},
        )
        if isinstance(result, Envelope):
            result.raise_for_error(f"Failed to download {path}")
            return ""
        return result

    async def upload_file(self, folder_path: str, file_name: str, content: str) -> None:
        """Write ``content`` to ``folder_path/file_name``, replacing any existing file."""
        files = {
            "filedata": (file_name, content.encode("utf-8"), "application/octet-stream"),
        }
        envelope = await self.session_manager.request(
            "SYNO.FileStation.Upload", 2, "upload",
            params={
                "path": folder_path,
                "create_parents": True,
                "overwrite": True,
            },
            files=files,
            http_method="POST",
        )
        envelope.raise_for_error("Upload failed")

    async def create_folder(self, folder_path: str, name: str) -> None:
        envelope = await self.session_manager.request(
            "SYNO.FileStation.CreateFolder", 2, "create",
            params={"folder_path": folder_path, "name": name, "create_parents": True},
        )
        envelope.raise_for_error("Failed to create folder")

    async def delete(self, path: str) -> None:
        envelope = await self.session_manager.request(
            "SYNO.FileStation.Delete", 2, "delete",
            params={"path": path, "recursive": True},
        )
        envelope.raise_for_error("Failed to delete item")

    async def rename(self, path: str, dest_folder_path: str, name: str) -> None:
        envelope = await self.session_manager.request(
            "SYNO.FileStation.Rename", 2, "rename",
            params={"path": path, "dest_folder_path": dest_folder_path, "name": name},
        )
        envelope.raise_for_error("Failed to move/rename item")

    async def create_share_link(self, path: str) -> List[ShareLink]:
        envelope = await self.session_manager.request(
            "SYNO.FileStation.Sharing", 3, "create", params={"path": path},
        )
        data = envelope.raise_for_error("Failed to create share link")
        return ShareLink.from_list(data.get("links", []))

    async def list_share_links(self) -> List[ShareLink]:
        envelope = await self.session_manager.request(
            "SYNO.FileStation.Sharing", 3, "list",
        )
        data = envelope.raise_for_error("Failed to list share links")
        return ShareLink.from_list(data.get("links", []))

    async def get_server_info(self) -> ServerInfo:
        envelope = await self.session_manager.request(
            "SYNO.FileStation.Info", 2, "get",
        )
        return ServerInfo(envelope.raise_for_error("Failed to get server info"))

    async def list_volumes(self) -> List[VolumeInfo]:
        envelope = await self.session_manager.request(
            "SYNO.FileStation.Volume", 1, "list",
        )
        data = envelope.raise_for_error("Failed to get quota info")
        return VolumeInfo.from_list(data.get("volumes", []))
