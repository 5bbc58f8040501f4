from __future__ import annotations

import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from ..models import Task, dump_tasks, parse_tasks
from .base import StorageBackend

logger = logging.getLogger(__name__)


class JSONFileBackend(StorageBackend):
    """Stores the task list as a JSON array in a single file.

    The parent directory and an empty ``[]`` file are created on construction,
    so a fresh install loads an empty list instead of failing. Every save
    rewrites the whole file through a temp file and ``os.replace``.
    """

    def __init__(self, data_file: Path) -> None:
        self.data_file = Path(data_file)
        logger.debug(f"Task file: {self.data_file}")
        self._create_directory_if_needed()
        self._create_file_if_needed()

    def save(self, tasks: List[Task]) -> bool:
        try:
            self._write_atomic(dump_tasks(tasks))
            return True
        except (OSError, ValueError) as e:
            logger.error(f"Error saving todos to {self.data_file}: {e}")
            return False

    def load(self) -> Optional[List[Task]]:
        try:
            return parse_tasks(self.data_file.read_bytes())
        except (OSError, ValidationError) as e:
            logger.warning(f"Error loading todos from {self.data_file}: {e}")
            return None

    def _write_atomic(self, payload: bytes) -> None:
        temp_fd, temp_path = tempfile.mkstemp(
            dir=self.data_file.parent, prefix=f".{self.data_file.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(temp_fd, "wb") as f:
                f.write(payload)
            if self.data_file.exists():
                # mkstemp creates 0600; keep whatever mode the user gave the file
                os.chmod(temp_path, stat.S_IMODE(self.data_file.stat().st_mode))
            os.replace(temp_path, self.data_file)
        except OSError:
            try:
                os.unlink(temp_path)
            except OSError:
                pass
            raise

    def _create_directory_if_needed(self) -> None:
        directory = self.data_file.parent
        if directory.exists():
            return
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Error creating directory {directory}: {e}")

    def _create_file_if_needed(self) -> None:
        if self.data_file.exists():
            logger.debug(f"File already exists at: {self.data_file}")
            return
        try:
            self._write_atomic(dump_tasks([]))
            logger.info(f"File created at: {self.data_file}")
        except OSError as e:
            logger.error(f"Error creating file {self.data_file}: {e}")
