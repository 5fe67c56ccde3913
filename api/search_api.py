#!/usr/bin/env python3
"""Task-based search over ``SYNO.FileStation.Search``."""

import asyncio
from typing import List, Optional
from api.auth_api import SessionManager
from api.errors import SearchResultError, SearchStartError, SearchTimeoutError
from config.logging_setup import get_logger
from config.settings import SearchConfig
from models.file_entry import FileEntry
from models.search_task import SearchTask

logger = get_logger(__name__)

SEARCH_API = "SYNO.FileStation.Search"
SEARCH_VERSION = 2


class SearchTaskOrchestrator:
    """Runs one search task from start to stop.

    The protocol is start -> status (repeated until finished) -> list -> stop.
    ``stop`` is sent exactly once for every task that was started, including
    when polling fails, times out or the calling task is cancelled.
    """

    def __init__(self, session_manager: SessionManager, config: Optional[SearchConfig] = None):
        self.session_manager = session_manager
        self.config = config or SearchConfig()

    async def search(self, folder_path: str, pattern: str,
                     timeout: Optional[float] = None) -> List[FileEntry]:
        """Search ``folder_path`` for ``pattern`` and return the matches."""
        task = await self.start(folder_path, pattern)
        try:
            await self.wait_until_finished(task, timeout)
            return await self.list(task)
        finally:
            await self.stop(task)

    async def start(self, folder_path: str, pattern: str) -> SearchTask:
        envelope = await self.session_manager.request(
            SEARCH_API, SEARCH_VERSION, "start",
            params={"folder_path": folder_path, "pattern": pattern},
        )
        data = envelope.raise_for_error("Search failed", SearchStartError)

        task_id = data.get("taskid")
        if not task_id:
            raise SearchStartError("Search failed: no task id in response")

        logger.info(f"Search task {task_id} started for {pattern!r} in {folder_path}")
        return SearchTask(task_id=str(task_id), folder_path=folder_path, pattern=pattern)

    async def status(self, task: SearchTask) -> SearchTask:
        envelope = await self.session_manager.request(
            SEARCH_API, SEARCH_VERSION, "status", params={"taskid": task.task_id},
        )
        task.record_status(envelope.raise_for_error("Search status failed"))
        return task

    async def wait_until_finished(self, task: SearchTask, timeout: Optional[float] = None) -> SearchTask:
        """Poll ``status`` every ``poll_interval`` seconds until the task finishes."""
        limit = self.config.timeout if timeout is None else timeout
        loop = asyncio.get_running_loop()
        deadline = loop.time() + limit

        while True:
            await asyncio.sleep(self.config.poll_interval)
            await self.status(task)
            if task.is_finished:
                logger.debug(f"Search task {task.task_id} finished after {task.polls} polls")
                return task
            if loop.time() >= deadline:
                raise SearchTimeoutError(
                    f"Search for {task.pattern!r} did not finish within {limit:g} seconds"
                )

    async def list(self, task: SearchTask) -> List[FileEntry]:
        envelope = await self.session_manager.request(
            SEARCH_API, SEARCH_VERSION, "list", params={"taskid": task.task_id},
        )
        data = envelope.raise_for_error("Failed to fetch search results", SearchResultError)
        return FileEntry.from_list(data.get("files", []))

    async def stop(self, task: SearchTask) -> None:
        """Release the server-side task. Failures are logged, never raised."""
        if task.stopped:
            return
        task.stopped = True
        try:
            envelope = await self.session_manager.request(
                SEARCH_API, SEARCH_VERSION, "stop", params={"taskid": task.task_id},
            )
            if not envelope.success:
                logger.warning(f"Stopping search task {task.task_id} returned error {envelope.error_code}")
        except Exception as e:
            logger.warning(f"Stopping search task {task.task_id} failed: {e}")
