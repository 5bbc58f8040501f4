from __future__ import annotations

from typing import List, Optional

from ..models import Task
from .base import StorageBackend


class InMemoryBackend(StorageBackend):
    """Keeps the snapshot for the current session only.

    An empty snapshot loads as None, so saving ``[]`` looks the same as never
    having saved at all.
    """

    def __init__(self) -> None:
        self._tasks: List[Task] = []

    def save(self, tasks: List[Task]) -> bool:
        self._tasks = [task.model_copy() for task in tasks]
        return True

    def load(self) -> Optional[List[Task]]:
        if not self._tasks:
            return None
        return [task.model_copy() for task in self._tasks]
