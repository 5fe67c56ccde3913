#!/usr/bin/env python3
"""Share link MCP tools."""

from typing import Dict, Any, List
from mcp.types import TextContent
from tools.base_tool import BaseTool
from api.filestation_api import FileStationAPIClient
from utils.formatting import format_share_links
from utils.paths import normalize_path


class GetShareLinksTool(BaseTool):
    """Tool to create and list sharing links for a path."""

    def __init__(self, api_client: FileStationAPIClient):
        super().__init__(
            name="get_share_links",
            description="Get sharing links for a file or folder. A new link is created first unless create is false."
        )
        self.api_client = api_client

    def get_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "path": {
                    "type": "string",
                    "description": "Path to get share links for"
                },
                "create": {
                    "type": "boolean",
                    "description": "Create a new share link before listing",
                    "default": True
                }
            },
            "required": ["path"],
            "additionalProperties": False
        }

    async def execute(self, arguments: Dict[str, Any]) -> List[TextContent]:
        path = normalize_path(arguments["path"])
        if arguments["create"]:
            await self.api_client.create_share_link(path)
        links = await self.api_client.list_share_links()
        return self.format_text(format_share_links(path, links))
