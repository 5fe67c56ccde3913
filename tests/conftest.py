"""Shared fixtures: a scripted DSM Web API behind httpx.MockTransport."""

import re
from urllib.parse import parse_qsl

import httpx
import pytest

from api.auth_api import SessionManager
from api.base_client import RemoteAPIClient
from api.search_api import SearchTaskOrchestrator
from config.settings import APIConfig, SearchConfig
from tools.registry import ToolRegistry

_MULTIPART_FIELD = re.compile(
    rb'name="([^"]+)"(?:; filename="([^"]*)")?\r\n(?:Content-Type: [^\r\n]*\r\n)?\r\n(.*?)\r\n--',
    re.S,
)


class FakeNAS:
    """Records every request and answers from per-method response queues.

    The last queued response for a method is repeated once the queue is
    down to one entry. Unscripted methods succeed with empty data, and
    login hands out ``sid-1``, ``sid-2``, ...
    """

    def __init__(self):
        self.calls = []
        self.responses = {}
        self.logins = 0

    def on(self, api, method, *bodies):
        self.responses.setdefault((api, method), []).extend(bodies)

    def handle(self, request: httpx.Request) -> httpx.Response:
        params = self._params(request)
        call = dict(params)
        call["_http_method"] = request.method
        call["_endpoint"] = request.url.path
        self.calls.append(call)

        key = (params.get("api"), params.get("method"))
        queue = self.responses.get(key)
        if queue:
            body = queue.pop(0) if len(queue) > 1 else queue[0]
        elif key == ("SYNO.API.Auth", "login"):
            body = {"success": True, "data": {"sid": f"sid-{self.logins + 1}"}}
        else:
            body = {"success": True, "data": {}}

        if key == ("SYNO.API.Auth", "login") and isinstance(body, dict) and body.get("success"):
            self.logins += 1

        if callable(body):
            return body(request)
        if isinstance(body, httpx.Response):
            return body
        return httpx.Response(200, json=body)

    @staticmethod
    def _params(request):
        if request.method == "GET":
            return dict(request.url.params)
        content_type = request.headers.get("content-type", "")
        if content_type.startswith("multipart/form-data"):
            params = {}
            for name, filename, value in _MULTIPART_FIELD.findall(request.content):
                params[name.decode()] = value.decode()
                if filename:
                    params[f"{name.decode()}.filename"] = filename.decode()
            return params
        return dict(parse_qsl(request.content.decode()))

    def methods(self):
        """``api.method`` names of all recorded calls, in order."""
        return [f"{c.get('api')}.{c.get('method')}" for c in self.calls]

    def count(self, api, method):
        return self.methods().count(f"{api}.{method}")

    def last(self, api, method):
        matching = [c for c in self.calls if c.get("api") == api and c.get("method") == method]
        return matching[-1]


@pytest.fixture
def nas():
    return FakeNAS()


@pytest.fixture
def api_config():
    return APIConfig(base_url="https://nas.local:5001", account="admin", password="secret")


@pytest.fixture
def remote_client(nas, api_config):
    return RemoteAPIClient(api_config, transport=httpx.MockTransport(nas.handle))


@pytest.fixture
def session_manager(remote_client):
    return SessionManager(remote_client)


@pytest.fixture
def orchestrator(session_manager):
    return SearchTaskOrchestrator(session_manager, SearchConfig(poll_interval=0, timeout=5))


@pytest.fixture
def registry(session_manager, orchestrator):
    registry = ToolRegistry()
    registry.register_all(session_manager, orchestrator)
    return registry