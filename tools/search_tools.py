#!/usr/bin/env python3
"""Search MCP tool."""

from typing import Dict, Any, List
from mcp.types import TextContent
from tools.base_tool import BaseTool
from api.search_api import SearchTaskOrchestrator
from utils.formatting import format_search_results
from utils.paths import normalize_path


class SearchTool(BaseTool):
    """Tool to search for files and folders by keyword."""

    def __init__(self, orchestrator: SearchTaskOrchestrator):
        super().__init__(
            name="search",
            description="Search for files and folders by keyword"
        )
        self.orchestrator = orchestrator

    def get_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "keyword": {
                    "type": "string",
                    "description": "Search keyword"
                },
                "path": {
                    "type": "string",
                    "description": "Path to search in",
                    "default": "/"
                }
            },
            "required": ["keyword"],
            "additionalProperties": False
        }

    async def execute(self, arguments: Dict[str, Any]) -> List[TextContent]:
        keyword = arguments["keyword"]
        path = normalize_path(arguments["path"])
        entries = await self.orchestrator.search(path, keyword)
        return self.format_text(format_search_results(keyword, path, entries))
