"""Search task orchestration tests."""

import asyncio

import httpx
import pytest

from api.errors import (
    RemoteCallError, SearchResultError, SearchStartError, SearchTimeoutError
)
from api.search_api import SearchTaskOrchestrator
from config.settings import SearchConfig

SEARCH = "SYNO.FileStation.Search"


def search_calls(nas):
    return [m for m in nas.methods() if m.startswith(SEARCH)]


@pytest.mark.asyncio
async def test_polls_until_finished_then_lists_and_stops(orchestrator, nas):
    nas.on(SEARCH, "start", {"success": True, "data": {"taskid": "task-1"}})
    nas.on(SEARCH, "status",
           {"success": True, "data": {"finished": False}},
           {"success": True, "data": {"finished": False}},
           {"success": True, "data": {"finished": True}})
    nas.on(SEARCH, "list", {"success": True, "data": {"files": [
        {"name": "beach.jpg", "path": "/photos/beach.jpg", "isdir": False},
        {"name": "beach", "path": "/photos/beach", "isdir": True},
    ]}})

    results = await orchestrator.search("/photos", "beach")

    assert search_calls(nas) == [
        f"{SEARCH}.start",
        f"{SEARCH}.status",
        f"{SEARCH}.status",
        f"{SEARCH}.status",
        f"{SEARCH}.list",
        f"{SEARCH}.stop",
    ]
    assert [r.path for r in results] == ["/photos/beach.jpg", "/photos/beach"]
    start = nas.last(SEARCH, "start")
    assert start["folder_path"] == "/photos"
    assert start["pattern"] == "beach"
    assert nas.last(SEARCH, "stop")["taskid"] == "task-1"


@pytest.mark.asyncio
async def test_start_failure_raises_and_nothing_to_stop(orchestrator, nas):
    nas.on(SEARCH, "start", {"success": False, "error": {"code": 401}})

    with pytest.raises(SearchStartError, match="Search failed"):
        await orchestrator.search("/photos", "beach")

    assert search_calls(nas) == [f"{SEARCH}.start"]


@pytest.mark.asyncio
async def test_list_failure_still_stops_task(orchestrator, nas):
    nas.on(SEARCH, "start", {"success": True, "data": {"taskid": "task-2"}})
    nas.on(SEARCH, "status", {"success": True, "data": {"finished": True}})
    nas.on(SEARCH, "list", {"success": False, "error": {"code": 599}})

    with pytest.raises(SearchResultError, match="No such task"):
        await orchestrator.search("/photos", "beach")

    assert search_calls(nas)[-2:] == [f"{SEARCH}.list", f"{SEARCH}.stop"]
    assert nas.count(SEARCH, "stop") == 1


@pytest.mark.asyncio
async def test_status_failure_stops_task(orchestrator, nas):
    nas.on(SEARCH, "start", {"success": True, "data": {"taskid": "task-3"}})
    nas.on(SEARCH, "status", {"success": False, "error": {"code": 402}})

    with pytest.raises(RemoteCallError, match="Search status failed"):
        await orchestrator.search("/photos", "beach")

    assert nas.count(SEARCH, "list") == 0
    assert nas.count(SEARCH, "stop") == 1


@pytest.mark.asyncio
async def test_timeout_stops_task(session_manager, nas):
    nas.on(SEARCH, "start", {"success": True, "data": {"taskid": "task-4"}})
    nas.on(SEARCH, "status", {"success": True, "data": {"finished": False}})
    orchestrator = SearchTaskOrchestrator(session_manager, SearchConfig(poll_interval=0, timeout=0))

    with pytest.raises(SearchTimeoutError):
        await orchestrator.search("/photos", "beach")

    assert nas.count(SEARCH, "status") == 1
    assert nas.count(SEARCH, "list") == 0
    assert nas.count(SEARCH, "stop") == 1


@pytest.mark.asyncio
async def test_cancellation_while_polling_stops_task(session_manager, nas):
    nas.on(SEARCH, "start", {"success": True, "data": {"taskid": "task-6"}})
    nas.on(SEARCH, "status", {"success": True, "data": {"finished": False}})
    orchestrator = SearchTaskOrchestrator(session_manager, SearchConfig(poll_interval=0.01, timeout=30))

    search = asyncio.create_task(orchestrator.search("/photos", "beach"))
    while nas.count(SEARCH, "status") < 2:
        await asyncio.sleep(0.01)
    search.cancel()

    with pytest.raises(asyncio.CancelledError):
        await search

    assert nas.count(SEARCH, "list") == 0
    assert nas.count(SEARCH, "stop") == 1
    assert nas.last(SEARCH, "stop")["taskid"] == "task-6"


@pytest.mark.asyncio
async def test_stop_failure_does_not_hide_results(orchestrator, nas):
    nas.on(SEARCH, "start", {"success": True, "data": {"taskid": "task-5"}})
    nas.on(SEARCH, "status", {"success": True, "data": {"finished": True}})
    nas.on(SEARCH, "list", {"success": True, "data": {"files": [
        {"name": "a.txt", "path": "/docs/a.txt", "isdir": False},
    ]}})
    nas.on(SEARCH, "stop", httpx.Response(500, text="oops"))

    results = await orchestrator.search("/docs", "a")

    assert [r.name for r in results] == ["a.txt"]
    assert nas.count(SEARCH, "stop") == 1
