"""API clients for the Synology DSM Web API."""

from .errors import (
    SynologyError, ValidationError, TransportError, AuthenticationError,
    SessionExpiredError, RemoteCallError, SearchStartError, SearchResultError,
    SearchTimeoutError
)

__all__ = [
    "SynologyError", "ValidationError", "TransportError", "AuthenticationError",
    "SessionExpiredError", "RemoteCallError", "SearchStartError", "SearchResultError",
    "SearchTimeoutError"
]
