"""MCP server implementation."""

from .mcp_server import MCPServer

__all__ = ["MCPServer"]
