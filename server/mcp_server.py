#!/usr/bin/env python3
"""MCP Server implementation for the Synology File Station tools."""

from typing import List, Dict, Any
from mcp.server import Server
from mcp.types import CallToolResult, Tool
from api.auth_api import SessionManager
from api.search_api import SearchTaskOrchestrator
from config.logging_setup import get_logger
from config.server_instructions import server_instructions
from tools.registry import ToolRegistry

logger = get_logger(__name__)

SERVER_NAME = "synolink-server"
SERVER_VERSION = "1.0.0"


class MCPServer:
    """Binds the tool registry to the MCP low-level server."""

    def __init__(self, session_manager: SessionManager, orchestrator: SearchTaskOrchestrator,
                 name: str = SERVER_NAME):
        self.session_manager = session_manager
        self.server = Server(name, version=SERVER_VERSION, instructions=server_instructions.render())
        self.tool_registry = ToolRegistry()
        self.tool_registry.register_all(session_manager, orchestrator)
        self._register_handlers()
        self._log_tool_summary()

    def _register_handlers(self):
        """Register MCP server handlers."""

        @self.server.list_tools()
        async def list_tools() -> List[Tool]:
            """List available tools."""
            return self.tool_registry.get_tool_list()

        # Arguments are validated by the registry so errors name the field
        # and read the same for every tool.
        @self.server.call_tool(validate_input=False)
        async def call_tool(name: str, arguments: Dict[str, Any]) -> CallToolResult:
            """Handle tool calls."""
            logger.info(f"Calling tool: {name}")
            result = await self.tool_registry.execute_tool(name, arguments or {})
            if result.isError:
                logger.info(f"Tool {name} returned an error")
            else:
                text_length = sum(len(getattr(c, "text", "")) for c in result.content)
                logger.info(f"Tool {name} succeeded ({text_length} chars)")
            return result

    def _log_tool_summary(self):
        stats = self.tool_registry.get_tool_stats()
        logger.info(f"Registered {stats['total_tools']} tools")
        for category, info in stats['categories'].items():
            logger.debug(f"  {category}: {', '.join(info['tools'])}")

    def get_server(self) -> Server:
        """Get the underlying MCP server."""
        return self.server
