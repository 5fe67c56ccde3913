#!/usr/bin/env python3
"""The ``{success, data | error}`` wrapper present in every DSM response."""

from typing import Any, Dict, List, Optional
from models.base import BaseModel
from api.errors import (
    SESSION_EXPIRED_CODES, RemoteCallError, SessionExpiredError, describe_error_code
)


class Envelope(BaseModel):
    """Decoded DSM response envelope."""

    def _parse_data(self, data: Dict[str, Any]):
        self.success = data.get("success") is True
        payload = data.get("data")
        self.data: Dict[str, Any] = payload if isinstance(payload, dict) else {}

        error = data.get("error") if isinstance(data.get("error"), dict) else {}
        code = error.get("code")
        self.error_code: Optional[int] = code if isinstance(code, int) else None

        errors = error.get("errors", [])
        if isinstance(errors, dict):
            errors = [errors]
        self.errors: List[Dict[str, Any]] = [e for e in errors if isinstance(e, dict)] \
            if isinstance(errors, list) else []

    @property
    def is_session_expired(self) -> bool:
        return not self.success and self.error_code in SESSION_EXPIRED_CODES

    @property
    def error_description(self) -> str:
        """Best message for a failed envelope: a detail message, else the code table."""
        for item in self.errors:
            if item.get("message"):
                return str(item["message"])
        # Per-path errors carry their own, more precise code
        for item in self.errors:
            if isinstance(item.get("code"), int):
                path = item.get("path")
                text = describe_error_code(item["code"])
                return f"{text} ({path})" if path else text
        return describe_error_code(self.error_code)

    def raise_for_error(self, context: str, error_class=RemoteCallError) -> Dict[str, Any]:
        """Return ``data`` for a successful envelope, raise ``error_class`` otherwise."""
        if self.success:
            return self.data
        if self.is_session_expired:
            raise SessionExpiredError(
                f"{context}: session expired (error {self.error_code})",
                code=self.error_code,
                errors=self.errors,
            )
        raise error_class(
            f"{context}: error {self.error_code} - {self.error_description}",
            code=self.error_code,
            errors=self.errors,
        )
