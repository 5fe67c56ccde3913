#!/usr/bin/env python3
"""Session lifecycle for the DSM Web API."""

import asyncio
from dataclasses import replace
from typing import Dict, Any, Optional
from api.base_client import RemoteAPIClient, AUTH_ENDPOINT, ENTRY_ENDPOINT
from api.errors import (
    AuthenticationError, SessionExpiredError, TransportError, describe_error_code
)
from config.logging_setup import get_logger
from models.envelope import Envelope
from models.session import Session, SessionState

logger = get_logger(__name__)

AUTH_API = "SYNO.API.Auth"
SESSION_NAME = "FileStation"


class SessionManager:
    """Owns the session id and the LOGGED_OUT / LOGGED_IN state machine.

    A cached session is trusted until a call reports it expired; the
    :meth:`request` wrapper then logs in again and retries that call once.
    """

    def __init__(self, client: RemoteAPIClient):
        self.client = client
        self.config = client.config
        self._session: Optional[Session] = None
        self._lock = asyncio.Lock()
        self.login_count = 0

    @property
    def state(self) -> SessionState:
        return SessionState.LOGGED_IN if self._session else SessionState.LOGGED_OUT

    @property
    def session(self) -> Optional[Session]:
        return self._session

    async def ensure_session(self) -> Session:
        """Return the cached session, logging in first if there is none."""
        async with self._lock:
            if self._session is not None:
                return replace(self._session, reused=True)
            return await self._login()

    async def login(self) -> Session:
        """Log in unconditionally, replacing any cached session."""
        async with self._lock:
            return await self._login()

    async def _login(self) -> Session:
        self._session = None
        self.login_count += 1
        logger.info(f"Logging in to {self.client.base_url} as {self.config.account}")

        try:
            envelope = await self.client.call(
                AUTH_ENDPOINT, AUTH_API, self.config.api_version, "login",
                params={
                    "account": self.config.account,
                    "passwd": self.config.password,
                    "session": SESSION_NAME,
                    "format": "sid",
                },
            )
        except TransportError as e:
            raise AuthenticationError(f"Failed to authenticate with Synology NAS: {e.message}")

        if not envelope.success:
            code = envelope.error_code
            logger.warning(f"Login failed with error {code}")
            raise AuthenticationError(
                f"Failed to authenticate with Synology NAS: error {code} - "
                f"{describe_error_code(code, auth=True)}",
                code=code,
                errors=envelope.errors,
            )

        sid = envelope.data.get("sid")
        if not isinstance(sid, str) or not sid:
            raise AuthenticationError("Failed to authenticate with Synology NAS: no session ID in response")

        self._session = Session(sid=sid)
        logger.info(f"Login successful (sid={self._session.sid_preview})")
        return self._session

    async def logout(self) -> bool:
        """End the session on the NAS. Never raises.

        Returns True if a logout request was sent.
        """
        async with self._lock:
            session, self._session = self._session, None
            if session is None:
                return False

            try:
                envelope = await self.client.call(
                    AUTH_ENDPOINT, AUTH_API, self.config.api_version, "logout",
                    params={"session": SESSION_NAME},
                    sid=session.sid,
                )
                if envelope.success:
                    logger.info("Logged out from Synology NAS")
                else:
                    logger.warning(f"Logout returned error {envelope.error_code}")
            except Exception as e:
                logger.warning(f"Logout failed: {e}")
            return True

    async def _renew(self, stale: Session) -> Session:
        """Log in again unless another task already replaced ``stale``."""
        async with self._lock:
            if self._session is not None and self._session.sid != stale.sid:
                return self._session
            logger.info("Session expired, logging in again")
            return await self._login()

    async def _invoke(self, session: Session, endpoint: str, api: str, version: Any,
                      method: str, params: Optional[Dict[str, Any]],
                      files: Optional[Dict[str, Any]], http_method: str) -> Envelope:
        envelope = await self.client.call(
            endpoint, api, version, method, params=params,
            sid=session.sid, files=files, http_method=http_method,
        )
        if envelope.is_session_expired:
            raise SessionExpiredError(
                f"{api}.{method}: session expired (error {envelope.error_code})",
                code=envelope.error_code,
            )
        return envelope

    async def request(
        self,
        api: str,
        version: Any,
        method: str,
        params: Optional[Dict[str, Any]] = None,
        files: Optional[Dict[str, Any]] = None,
        http_method: str = "GET",
        endpoint: str = ENTRY_ENDPOINT,
    ) -> Envelope:
        """Authenticated call with one transparent relogin on session expiry."""
        session = await self.ensure_session()
        try:
            return await self._invoke(session, endpoint, api, version, method,
                                      params, files, http_method)
        except SessionExpiredError:
            session = await self._renew(session)
            return await self._invoke(session, endpoint, api, version, method,
                                      params, files, http_method)

    async def download(self, api: str, version: Any, method: str,
                       params: Optional[Dict[str, Any]] = None) -> Any:
        """Raw download with the same relogin policy as :meth:`request`."""
        session = await self.ensure_session()
        result = await self.client.download(api, version, method, params, sid=session.sid)
        if isinstance(result, Envelope) and result.is_session_expired:
            session = await self._renew(session)
            result = await self.client.download(api, version, method, params, sid=session.sid)
        return result

    def get_session_info(self) -> Dict[str, Any]:
        """Describe the current session without exposing the full SID."""
        session = self._session
        return {
            "state": self.state.value,
            "sid_preview": session.sid_preview if session else None,
            "age_seconds": round(session.age_seconds) if session else None,
            "logins": self.login_count,
        }
