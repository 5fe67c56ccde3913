#!/usr/bin/env python3
"""Error types raised by the Synology API layer and the tools built on it."""

from typing import Any, Dict, List, Optional


# Codes shared by all DSM Web APIs plus the File Station specific ones.
SYNOLOGY_ERROR_CODES = {
    100: "Unknown error",
    101: "No parameter of API, method or version",
    102: "The requested API does not exist",
    103: "The requested method does not exist",
    104: "The requested version does not support the functionality",
    105: "The logged in session does not have permission",
    106: "Session timeout",
    107: "Session interrupted by duplicate login",
    119: "SID not found",
    400: "Invalid parameter of file operation",
    401: "Unknown error of file operation",
    402: "System is too busy",
    403: "Invalid user does this file operation",
    404: "Invalid group does this file operation",
    405: "Invalid user and group does this file operation",
    406: "Can't get user/group information from the account server",
    407: "Operation not permitted",
    408: "No such file or directory",
    409: "Non-supported file system",
    410: "Failed to connect internet-based file system",
    411: "Read-only file system",
    412: "Filename too long in the non-encrypted file system",
    413: "Filename too long in the encrypted file system",
    414: "File already exists",
    415: "Disk quota exceeded",
    416: "No space left on device",
    417: "Input/output error",
    418: "Illegal name or path",
    419: "Illegal file name",
    420: "Illegal file name on FAT file system",
    421: "Device or resource busy",
    599: "No such task of the file operation",
}

# Login-specific meanings of the 4xx codes returned by SYNO.API.Auth.
AUTH_ERROR_CODES = {
    400: "No such account or incorrect password",
    401: "Account disabled",
    402: "Permission denied",
    403: "2-step verification code required",
    404: "Failed to authenticate 2-step verification code",
}

# Codes after which a fresh login lets the same call succeed.
SESSION_EXPIRED_CODES = frozenset({106, 107, 119})


def describe_error_code(code: Optional[int], auth: bool = False) -> str:
    """Return a human-readable description for a DSM error code."""
    if code is None:
        return "Unknown error"
    if auth and code in AUTH_ERROR_CODES:
        return AUTH_ERROR_CODES[code]
    return SYNOLOGY_ERROR_CODES.get(code, f"Unknown error code {code}")


class SynologyError(Exception):
    """Base class for every error the server turns into an error result."""

    def __init__(self, message: str, code: Optional[int] = None,
                 errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.errors = errors or []


class ValidationError(SynologyError):
    """A tool argument is missing or has the wrong type."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


class TransportError(SynologyError):
    """No usable HTTP response was obtained from the NAS."""


class AuthenticationError(SynologyError):
    """Login failed: bad credentials, unreachable host or malformed reply."""


class SessionExpiredError(SynologyError):
    """The NAS reported that the session id is no longer valid."""


class RemoteCallError(SynologyError):
    """A non-auth API call returned ``success: false``."""


class SearchStartError(RemoteCallError):
    """The search task could not be started."""


class SearchResultError(RemoteCallError):
    """The results of a finished search task could not be fetched."""


class SearchTimeoutError(SynologyError):
    """The search task did not finish within the allowed time."""
