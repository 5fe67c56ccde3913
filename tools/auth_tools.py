#!/usr/bin/env python3
"""Authentication-related MCP tools."""

from typing import Dict, Any, List
from mcp.types import TextContent
from tools.base_tool import BaseTool
from api.auth_api import SessionManager

EMPTY_SCHEMA = {
    "type": "object",
    "properties": {},
    "additionalProperties": False
}


class LoginTool(BaseTool):
    """Tool to open (or reuse) a File Station session."""

    def __init__(self, session_manager: SessionManager):
        super().__init__(
            name="login",
            description="Login to Synology NAS. Other tools log in automatically, so this is only needed to verify credentials."
        )
        self.session_manager = session_manager

    def get_schema(self) -> Dict[str, Any]:
        return EMPTY_SCHEMA

    async def execute(self, arguments: Dict[str, Any]) -> List[TextContent]:
        session = await self.session_manager.ensure_session()
        if session.reused:
            return self.format_text(f"Already logged in with session ID: {session.sid_preview}")
        return self.format_text(f"Successfully logged in with session ID: {session.sid_preview}")


class LogoutTool(BaseTool):
    """Tool to end the current session."""

    def __init__(self, session_manager: SessionManager):
        super().__init__(
            name="logout",
            description="Logout from Synology NAS"
        )
        self.session_manager = session_manager

    def get_schema(self) -> Dict[str, Any]:
        return EMPTY_SCHEMA

    async def execute(self, arguments: Dict[str, Any]) -> List[TextContent]:
        await self.session_manager.logout()
        return self.format_text("Successfully logged out")
