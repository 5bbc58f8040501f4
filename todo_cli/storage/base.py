from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models import Task


class StorageBackend(ABC):
    """Persists whole snapshots of the task list."""

    @abstractmethod
    def save(self, tasks: List[Task]) -> bool:
        """Replace the stored snapshot with ``tasks``.

        Returns False when the snapshot could not be stored; a failed save
        leaves the previously stored snapshot loadable.
        """

    @abstractmethod
    def load(self) -> Optional[List[Task]]:
        """Return the most recently saved snapshot, or None if nothing is stored."""
