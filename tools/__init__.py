"""MCP tools."""

from .base_tool import BaseTool
from .registry import ToolRegistry

__all__ = ["BaseTool", "ToolRegistry"]
