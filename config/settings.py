#!/usr/bin/env python3
"""Configuration management for the MCP server."""

import os
from dataclasses import dataclass
from typing import Any, Dict, List, Optional
from dotenv import load_dotenv


USAGE = "Usage: synolink-mcp-server <synology-url> <username> <password> [api-version]"

DEFAULT_API_VERSION = "7"


class UsageError(Exception):
    """Raised when the command line is missing required arguments."""


@dataclass
class APIConfig:
    """Configuration for the NAS connection."""
    base_url: str
    account: str
    password: str
    api_version: str = DEFAULT_API_VERSION
    verify_ssl: bool = False
    timeout: float = 30.0


@dataclass
class SearchConfig:
    """Polling behaviour of the search task orchestrator."""
    poll_interval: float = 1.0
    timeout: float = 300.0


@dataclass
class LoggingConfig:
    level: str = "INFO"
    log_file: str = ""


class ConfigManager:
    """Builds the server configuration from argv plus ambient settings.

    Connection details only ever come from the command line. The environment
    (and a ``.env`` file, if present) can tune logging, TLS verification and
    timeouts.
    """

    def __init__(self, argv: List[str]):
        load_dotenv()
        self.api_config = self._load_api_config(argv)
        self.search_config = self._load_search_config()
        self.logging_config = LoggingConfig(
            level=os.getenv("LOG_LEVEL", "INFO").upper(),
            log_file=os.getenv("LOG_FILE", ""),
        )

    def _load_api_config(self, argv: List[str]) -> APIConfig:
        if len(argv) < 3:
            raise UsageError(USAGE)

        base_url, account, password = argv[0], argv[1], argv[2]
        api_version = argv[3] if len(argv) > 3 else DEFAULT_API_VERSION

        if not base_url.strip() or not account.strip():
            raise UsageError(USAGE)

        return APIConfig(
            base_url=base_url.rstrip("/"),
            account=account,
            password=password,
            api_version=api_version,
            verify_ssl=os.getenv("VERIFY_SSL", "false").lower() == "true",
            timeout=_float_env("API_TIMEOUT", 30.0),
        )

    def _load_search_config(self) -> SearchConfig:
        return SearchConfig(
            poll_interval=_float_env("SEARCH_POLL_INTERVAL", 1.0),
            timeout=_float_env("SEARCH_TIMEOUT", 300.0),
        )

    def get_config_summary(self) -> Dict[str, Any]:
        """Get configuration summary for debugging."""
        return {
            "base_url": self.api_config.base_url,
            "account": self.api_config.account,
            "api_version": self.api_config.api_version,
            "verify_ssl": self.api_config.verify_ssl,
            "timeout": self.api_config.timeout,
            "search_poll_interval": self.search_config.poll_interval,
            "search_timeout": self.search_config.timeout,
        }


def _float_env(name: str, default: float) -> float:
    raw: Optional[str] = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise UsageError(f"{name} must be a number, got {raw!r}")
