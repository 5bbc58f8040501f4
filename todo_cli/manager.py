from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Tuple

from .models import Task
from .storage.base import StorageBackend

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MutationResult:
    """Outcome of a mutating TaskManager call."""

    applied: bool
    saved: bool

    @property
    def unsaved(self) -> bool:
        """True when the in-memory list changed but the backend did not store it."""
        return self.applied and not self.saved


_NOT_APPLIED = MutationResult(applied=False, saved=False)


class TaskManager:
    """Owns the live task list and persists it after every change.

    Each mutation validates, edits the in-memory list, then saves the whole
    list. A failed save does not roll back the in-memory change.
    """

    def __init__(self, backend: StorageBackend) -> None:
        self._backend = backend
        loaded = backend.load()
        self._tasks: List[Task] = list(loaded) if loaded is not None else []
        logger.debug(f"Loaded {len(self._tasks)} todos")

    def __len__(self) -> int:
        return len(self._tasks)

    def list_tasks(self) -> List[Tuple[int, Task]]:
        return [
            (position, task.model_copy())
            for position, task in enumerate(self._tasks, start=1)
        ]

    def add_task(self, title: str) -> MutationResult:
        self._tasks.append(Task(title=title))
        return self._persist()

    def toggle_completion(self, index: int) -> MutationResult:
        if not self._in_range(index):
            return _NOT_APPLIED
        task = self._tasks[index]
        task.is_completed = not task.is_completed
        return self._persist()

    def delete_task(self, index: int) -> MutationResult:
        if not self._in_range(index):
            return _NOT_APPLIED
        del self._tasks[index]
        return self._persist()

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self._tasks)

    def _persist(self) -> MutationResult:
        saved = self._backend.save(list(self._tasks))
        if not saved:
            logger.warning("Todo list changed in memory but was not saved")
        return MutationResult(applied=True, saved=saved)
