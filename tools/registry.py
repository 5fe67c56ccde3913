#!/usr/bin/env python3
"""Tool registry for managing MCP tools."""

import asyncio
from typing import Dict, List, Any
from mcp.types import CallToolResult, Tool
from api.auth_api import SessionManager
from api.errors import SynologyError, ValidationError
from api.filestation_api import FileStationAPIClient
from api.search_api import SearchTaskOrchestrator
from config.logging_setup import get_logger
from tools.base_tool import BaseTool, error_result
from tools.auth_tools import LoginTool, LogoutTool
from tools.file_tools import (
    ListFoldersTool, GetFileTool, UploadFileTool,
    CreateFolderTool, DeleteItemTool, MoveItemTool
)
from tools.info_tools import GetServerInfoTool, GetQuotaInfoTool
from tools.search_tools import SearchTool
from tools.share_tools import GetShareLinksTool

logger = get_logger(__name__)

TOOL_CATEGORIES = {
    'auth': ['login', 'logout'],
    'files': ['list_folders', 'get_file', 'upload_file', 'create_folder', 'delete_item', 'move_item'],
    'search': ['search'],
    'sharing': ['get_share_links'],
    'info': ['get_server_info', 'get_quota_info'],
}


class ToolRegistry:
    """Registry for managing MCP tools.

    Calls are executed one at a time; every outcome, including validation
    failures and unexpected exceptions, is returned as a CallToolResult.
    """

    def __init__(self):
        self.tools: Dict[str, BaseTool] = {}
        self._call_lock = asyncio.Lock()

    def register_tool(self, tool: BaseTool):
        """Register a tool."""
        self.tools[tool.name] = tool
        logger.debug(f"Registered tool: {tool.name}")

    def register_auth_tools(self, session_manager: SessionManager):
        """Register authentication-related tools."""
        self.register_tool(LoginTool(session_manager))
        self.register_tool(LogoutTool(session_manager))

    def register_file_tools(self, filestation_client: FileStationAPIClient):
        """Register all file and folder tools."""
        self.register_tool(ListFoldersTool(filestation_client))
        self.register_tool(GetFileTool(filestation_client))
        self.register_tool(UploadFileTool(filestation_client))
        self.register_tool(CreateFolderTool(filestation_client))
        self.register_tool(DeleteItemTool(filestation_client))
        self.register_tool(MoveItemTool(filestation_client))

    def register_search_tools(self, orchestrator: SearchTaskOrchestrator):
        self.register_tool(SearchTool(orchestrator))

    def register_share_tools(self, filestation_client: FileStationAPIClient):
        self.register_tool(GetShareLinksTool(filestation_client))

    def register_info_tools(self, filestation_client: FileStationAPIClient):
        self.register_tool(GetServerInfoTool(filestation_client))
        self.register_tool(GetQuotaInfoTool(filestation_client))

    def register_all(self, session_manager: SessionManager, orchestrator: SearchTaskOrchestrator):
        """Register the full tool catalog on top of one session manager."""
        filestation_client = FileStationAPIClient(session_manager)
        self.register_auth_tools(session_manager)
        self.register_file_tools(filestation_client)
        self.register_search_tools(orchestrator)
        self.register_share_tools(filestation_client)
        self.register_info_tools(filestation_client)

    def get_tool_list(self) -> List[Tool]:
        """Get list of all registered tools for MCP."""
        return [tool.to_mcp_tool() for tool in self.tools.values()]

    def get_tool_names(self) -> List[str]:
        """Get list of all registered tool names."""
        return list(self.tools.keys())

    async def execute_tool(self, name: str, arguments: Dict[str, Any]) -> CallToolResult:
        """Validate and execute a tool by name."""
        tool = self.tools.get(name)
        if tool is None:
            return error_result(
                f"Unknown tool: {name}. Available tools: {', '.join(self.get_tool_names())}"
            )

        try:
            validated = tool.validate_arguments(arguments)
        except ValidationError as e:
            logger.info(f"Rejected call to {name}: {e.message}")
            return tool.format_error(e.message)

        async with self._call_lock:
            try:
                content = await tool.execute(validated)
                return CallToolResult(content=content, isError=False)
            except SynologyError as e:
                logger.warning(f"Tool {name} failed: {e.message}")
                return tool.format_error(e.message)
            except Exception as e:
                logger.exception(f"Unexpected error executing tool {name}")
                return tool.format_error(f"Unexpected error: {e}")

    def get_tool_stats(self) -> Dict[str, Any]:
        """Get statistics about registered tools."""
        categories = {}
        for category, names in TOOL_CATEGORIES.items():
            registered = [n for n in names if n in self.tools]
            if registered:
                categories[category] = {'count': len(registered), 'tools': registered}

        return {
            'total_tools': len(self.tools),
            'categories': categories
        }
