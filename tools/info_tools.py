#!/usr/bin/env python3
"""Server and storage information MCP tools."""

from typing import Dict, Any, List
from mcp.types import TextContent
from tools.base_tool import BaseTool
from api.filestation_api import FileStationAPIClient
from utils.formatting import format_quota_info, format_server_info


class GetServerInfoTool(BaseTool):
    """Tool to show File Station server information."""

    def __init__(self, api_client: FileStationAPIClient):
        super().__init__(
            name="get_server_info",
            description="Get Synology server information"
        )
        self.api_client = api_client

    def get_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {},
            "additionalProperties": False
        }

    async def execute(self, arguments: Dict[str, Any]) -> List[TextContent]:
        info = await self.api_client.get_server_info()
        return self.format_text(format_server_info(info))


class GetQuotaInfoTool(BaseTool):
    """Tool to show size and usage of storage volumes."""

    def __init__(self, api_client: FileStationAPIClient):
        super().__init__(
            name="get_quota_info",
            description="Get quota information for the specified volume"
        )
        self.api_client = api_client

    def get_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "volume": {
                    "type": "string",
                    "description": "Volume name"
                }
            },
            "additionalProperties": False
        }

    async def execute(self, arguments: Dict[str, Any]) -> List[TextContent]:
        volumes = await self.api_client.list_volumes()
        return self.format_text(format_quota_info(volumes, arguments.get("volume")))
