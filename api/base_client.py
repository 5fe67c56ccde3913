#!/usr/bin/env python3
"""Low-level client for the DSM Web API."""

import re
import httpx
from typing import Dict, Any, Optional
from config.settings import APIConfig
from config.logging_setup import get_logger
from models.envelope import Envelope
from api.errors import TransportError

logger = get_logger(__name__)

AUTH_ENDPOINT = "auth.cgi"
ENTRY_ENDPOINT = "entry.cgi"

_ENVELOPE_PREFIX = re.compile(r'\s*\{\s*"success"\s*:')


class RemoteAPIClient:
    """Issues single requests against ``<base_url>/webapi/<endpoint>``.

    The client never retries and never logs in; it attaches whatever session
    id it is given and decodes the response into an :class:`Envelope`.
    Only the absence of a usable response raises (:class:`TransportError`);
    ``success: false`` comes back as a failed envelope.
    """

    def __init__(self, config: APIConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config
        self.base_url = config.base_url.rstrip('/')
        self._transport = transport

    def _url(self, endpoint: str) -> str:
        return f"{self.base_url}/webapi/{endpoint}"

    def _build_params(self, api: str, version: Any, method: str,
                      params: Optional[Dict[str, Any]], sid: Optional[str]) -> Dict[str, str]:
        request_params = {
            "api": api,
            "version": str(version),
            "method": method,
        }
        for key, value in (params or {}).items():
            if value is None:
                continue
            request_params[key] = _wire_value(value)
        if sid:
            request_params["_sid"] = sid
        return request_params

    async def _send(self, http_method: str, endpoint: str, label: str, **kwargs) -> httpx.Response:
        url = self._url(endpoint)
        logger.debug(f"{http_method} {url} ({label})")
        try:
            async with httpx.AsyncClient(
                verify=self.config.verify_ssl,
                timeout=self.config.timeout,
                transport=self._transport,
            ) as client:
                response = await client.request(http_method, url, **kwargs)
        except httpx.HTTPError as e:
            raise TransportError(f"{label}: request to {self.base_url} failed: {e}")

        logger.debug(f"{label}: HTTP {response.status_code}")
        return response

    async def call(
        self,
        endpoint: str,
        api: str,
        version: Any,
        method: str,
        params: Optional[Dict[str, Any]] = None,
        sid: Optional[str] = None,
        files: Optional[Dict[str, Any]] = None,
        http_method: str = "GET",
    ) -> Envelope:
        """Call ``api.method`` and return the decoded envelope.

        GET sends everything as query parameters. POST sends the parameters as
        a form body, multipart when ``files`` is given.
        """
        label = f"{api}.{method}"
        request_params = self._build_params(api, version, method, params, sid)

        if http_method.upper() == "GET":
            response = await self._send("GET", endpoint, label, params=request_params)
        else:
            response = await self._send(http_method.upper(), endpoint, label,
                                        data=request_params, files=files)

        return self._decode(response, label)

    async def download(
        self,
        api: str,
        version: Any,
        method: str,
        params: Optional[Dict[str, Any]] = None,
        sid: Optional[str] = None,
    ) -> Any:
        """Fetch a raw (non-envelope) body from ``entry.cgi``.

        Returns the response text on success. When the NAS answers with a
        JSON envelope instead of file data, that envelope is returned so the
        caller can inspect the error.
        """
        label = f"{api}.{method}"
        request_params = self._build_params(api, version, method, params, sid)
        response = await self._send("GET", ENTRY_ENDPOINT, label, params=request_params)

        if response.status_code >= 400:
            raise TransportError(f"{label}: HTTP {response.status_code}")

        text = response.text
        content_type = response.headers.get("content-type", "")
        # Some DSM builds send error envelopes as text/plain
        looks_like_json = (content_type.startswith("application/json")
                           or content_type.startswith("text/json")
                           or _ENVELOPE_PREFIX.match(text))
        if looks_like_json:
            try:
                body = response.json()
            except ValueError:
                return text
            if isinstance(body, dict) and "success" in body:
                return Envelope(body)
        return text

    def _decode(self, response: httpx.Response, label: str) -> Envelope:
        if response.status_code >= 400:
            raise TransportError(f"{label}: HTTP {response.status_code} from {self.base_url}")
        try:
            body = response.json()
        except ValueError:
            raise TransportError(f"{label}: response is not JSON")
        if not isinstance(body, dict) or "success" not in body:
            raise TransportError(f"{label}: response is not a DSM envelope")

        envelope = Envelope(body)
        if not envelope.success:
            logger.debug(f"{label}: failed with error {envelope.error_code}")
        return envelope


def _wire_value(value: Any) -> str:
    """DSM expects lowercase booleans."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
