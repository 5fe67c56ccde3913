#!/usr/bin/env python3
"""File and folder MCP tools."""

from typing import Dict, Any, List
from mcp.types import TextContent
from tools.base_tool import BaseTool
from api.errors import ValidationError
from api.filestation_api import FileStationAPIClient
from utils.formatting import format_listing
from utils.paths import normalize_path, split_path


class ListFoldersTool(BaseTool):
    """Tool to list the contents of a folder."""

    def __init__(self, api_client: FileStationAPIClient):
        super().__init__(
            name="list_folders",
            description="List files and folders in the specified path"
        )
        self.api_client = api_client

    def get_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "path": {
                    "type": "string",
                    "description": "Path to list files from, e.g., '/photos'"
                }
            },
            "required": ["path"],
            "additionalProperties": False
        }

    async def execute(self, arguments: Dict[str, Any]) -> List[TextContent]:
        path = normalize_path(arguments["path"])
        entries = await self.api_client.list_folder(path)
        return self.format_text(format_listing(path, entries))


class GetFileTool(BaseTool):
    """Tool to read a file's content."""

    def __init__(self, api_client: FileStationAPIClient):
        super().__init__(
            name="get_file",
            description="Get the content of a file from Synology NAS"
        )
        self.api_client = api_client

    def get_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "path": {
                    "type": "string",
                    "description": "Full path to the file on Synology NAS"
                }
            },
            "required": ["path"],
            "additionalProperties": False
        }

    async def execute(self, arguments: Dict[str, Any]) -> List[TextContent]:
        content = await self.api_client.read_file(normalize_path(arguments["path"]))
        return self.format_text(content)


class UploadFileTool(BaseTool):
    """Tool to write text content to a file."""

    def __init__(self, api_client: FileStationAPIClient):
        super().__init__(
            name="upload_file",
            description="Upload a file to Synology NAS. Missing parent folders are created and an existing file is overwritten."
        )
        self.api_client = api_client

    def get_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "path": {
                    "type": "string",
                    "description": "Destination path on Synology NAS including filename"
                },
                "content": {
                    "type": "string",
                    "description": "Content of the file to upload"
                }
            },
            "required": ["path", "content"],
            "additionalProperties": False
        }

    def validate_arguments(self, arguments: Dict[str, Any]) -> Dict[str, Any]:
        validated = super().validate_arguments(arguments)
        split_path(validated["path"])
        return validated

    async def execute(self, arguments: Dict[str, Any]) -> List[TextContent]:
        folder_path, file_name = split_path(arguments["path"])
        await self.api_client.upload_file(folder_path, file_name, arguments["content"])
        return self.format_text(f"Successfully uploaded file to {normalize_path(arguments['path'])}")


class CreateFolderTool(BaseTool):
    """Tool to create a folder."""

    def __init__(self, api_client: FileStationAPIClient):
        super().__init__(
            name="create_folder",
            description="Create a new folder on Synology NAS"
        )
        self.api_client = api_client

    def get_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "path": {
                    "type": "string",
                    "description": "Full path to create folder at"
                },
                "name": {
                    "type": "string",
                    "description": "Name of the new folder"
                }
            },
            "required": ["path", "name"],
            "additionalProperties": False
        }

    def validate_arguments(self, arguments: Dict[str, Any]) -> Dict[str, Any]:
        validated = super().validate_arguments(arguments)
        if not validated["name"].strip():
            raise ValidationError("name", "Invalid arguments: 'name' must not be blank")
        return validated

    async def execute(self, arguments: Dict[str, Any]) -> List[TextContent]:
        path = normalize_path(arguments["path"])
        name = arguments["name"].strip()
        await self.api_client.create_folder(path, name)
        return self.format_text(f"Successfully created folder {name} at {path}")


class DeleteItemTool(BaseTool):
    """Tool to delete a file or folder."""

    def __init__(self, api_client: FileStationAPIClient):
        super().__init__(
            name="delete_item",
            description="Delete a file or folder from Synology NAS. Folders are deleted recursively."
        )
        self.api_client = api_client

    def get_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "path": {
                    "type": "string",
                    "description": "Full path to the file or folder to delete"
                }
            },
            "required": ["path"],
            "additionalProperties": False
        }

    async def execute(self, arguments: Dict[str, Any]) -> List[TextContent]:
        path = normalize_path(arguments["path"])
        await self.api_client.delete(path)
        return self.format_text(f"Successfully deleted {path}")


class MoveItemTool(BaseTool):
    """Tool to move or rename a file or folder."""

    def __init__(self, api_client: FileStationAPIClient):
        super().__init__(
            name="move_item",
            description="Move or rename a file or folder on Synology NAS"
        )
        self.api_client = api_client

    def get_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "source": {
                    "type": "string",
                    "description": "Full path to the source file or folder"
                },
                "destination": {
                    "type": "string",
                    "description": "Full path to the destination location"
                }
            },
            "required": ["source", "destination"],
            "additionalProperties": False
        }

    def validate_arguments(self, arguments: Dict[str, Any]) -> Dict[str, Any]:
        validated = super().validate_arguments(arguments)
        split_path(validated["destination"], field="destination")
        return validated

    async def execute(self, arguments: Dict[str, Any]) -> List[TextContent]:
        source = normalize_path(arguments["source"])
        dest_folder, new_name = split_path(arguments["destination"], field="destination")
        await self.api_client.rename(source, dest_folder, new_name)
        return self.format_text(f"Successfully moved {source} to {normalize_path(arguments['destination'])}")
