#!/usr/bin/env python3
"""Entry point: log in, serve the tools over stdio, log out on the way out."""

import asyncio
import signal
import sys
from typing import List, Optional
from mcp.server.stdio import stdio_server
from api.auth_api import SessionManager
from api.base_client import RemoteAPIClient
from api.errors import AuthenticationError
from api.search_api import SearchTaskOrchestrator
from config.settings import ConfigManager, UsageError
from config.logging_setup import setup_logging, get_logger
from server.mcp_server import MCPServer

logger = get_logger(__name__)


def _install_signal_handlers() -> None:
    """Turn SIGTERM into a cancellation of the main task so cleanup runs."""
    loop = asyncio.get_running_loop()
    task = asyncio.current_task()
    try:
        loop.add_signal_handler(signal.SIGTERM, task.cancel)
    except (NotImplementedError, RuntimeError):
        # Windows event loops have no signal handler support
        pass


async def main(config: ConfigManager) -> int:
    """Main entry point for the MCP server."""
    api_config = config.api_config
    print(f"🚀 Starting Synology MCP server for {api_config.base_url}...", file=sys.stderr)

    session_manager = SessionManager(RemoteAPIClient(api_config))

    # Nothing can be served without a session, so the first login is fatal
    try:
        await session_manager.login()
    except AuthenticationError as e:
        print(f"❌ {e.message}", file=sys.stderr)
        return 1

    orchestrator = SearchTaskOrchestrator(session_manager, config.search_config)
    mcp_server = MCPServer(session_manager, orchestrator)
    server = mcp_server.get_server()
    _install_signal_handlers()

    try:
        async with stdio_server() as (read_stream, write_stream):
            print("🔌 Synology MCP Server running on stdio", file=sys.stderr)
            print(f"   Connected to: {api_config.base_url}", file=sys.stderr)
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options()
            )
    finally:
        logger.debug(f"Session at shutdown: {session_manager.get_session_info()}")
        await session_manager.logout()
        logger.info("Server stopped")

    return 0


def run(argv: Optional[List[str]] = None) -> None:
    """Console script entry point."""
    argv = sys.argv[1:] if argv is None else argv

    try:
        config = ConfigManager(argv)
    except UsageError as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)

    setup_logging(config.logging_config.level, config.logging_config.log_file)
    logger.debug(f"Configuration: {config.get_config_summary()}")

    try:
        exit_code = asyncio.run(main(config))
    except (KeyboardInterrupt, asyncio.CancelledError):
        print("🛑 Server stopped", file=sys.stderr)
        exit_code = 0
    except Exception as e:
        print(f"❌ Fatal error running server: {e}", file=sys.stderr)
        logger.exception("Fatal error running server")
        exit_code = 1

    sys.exit(exit_code)


if __name__ == "__main__":
    run()
