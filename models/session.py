#!/usr/bin/env python3
"""Session state held by the session manager."""

import time
from dataclasses import dataclass, field
from enum import Enum


class SessionState(Enum):
    LOGGED_OUT = "logged_out"
    LOGGED_IN = "logged_in"


@dataclass
class Session:
    """An authenticated DSM session.

    ``reused`` tells the caller of ``ensure_session()`` whether the cached
    session was handed back or a login was performed for this call.
    """
    sid: str
    created_at: float = field(default_factory=time.time)
    reused: bool = False

    @property
    def sid_preview(self) -> str:
        if len(self.sid) > 16:
            return f"{self.sid[:8]}...{self.sid[-4:]}"
        return f"{self.sid[:4]}..."

    @property
    def age_seconds(self) -> float:
        return time.time() - self.created_at
