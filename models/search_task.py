#!/usr/bin/env python3
"""Server-side search task tracked by the search orchestrator."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class SearchStatus(Enum):
    RUNNING = "running"
    FINISHED = "finished"


@dataclass
class SearchTask:
    task_id: str
    folder_path: str
    pattern: str
    status: SearchStatus = SearchStatus.RUNNING
    polls: int = 0
    stopped: bool = False

    @property
    def is_finished(self) -> bool:
        return self.status is SearchStatus.FINISHED

    def record_status(self, data: Dict[str, Any]) -> None:
        """Apply one ``status`` response to the task."""
        self.polls += 1
        if data.get("finished") is True:
            self.status = SearchStatus.FINISHED
