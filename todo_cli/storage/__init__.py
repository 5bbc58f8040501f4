from __future__ import annotations

from pathlib import Path

from .base import StorageBackend
from .json_backend import JSONFileBackend
from .memory_backend import InMemoryBackend

__all__ = [
    "StorageBackend",
    "JSONFileBackend",
    "InMemoryBackend",
    "create_backend",
]


def create_backend(name: str, data_file: Path) -> StorageBackend:
    """Build the backend registered under ``name`` ("json"/"file" or "memory")."""
    lname = name.strip().lower()
    if lname in ("json", "file"):
        return JSONFileBackend(data_file)
    if lname == "memory":
        return InMemoryBackend()
    raise ValueError(f"Unknown storage backend: {name!r}. Expected 'json' or 'memory'.")
