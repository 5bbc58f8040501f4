from __future__ import annotations

from todo_cli.models import Task
from todo_cli.storage import InMemoryBackend


def test_starts_with_nothing_stored() -> None:
    assert InMemoryBackend().load() is None


def test_save_then_load() -> None:
    backend = InMemoryBackend()
    tasks = [Task(title="a"), Task(title="b")]
    assert backend.save(tasks) is True
    assert backend.load() == tasks


def test_saving_empty_list_reads_back_as_nothing_stored() -> None:
    backend = InMemoryBackend()
    backend.save([Task(title="a")])
    assert backend.save([]) is True
    assert backend.load() is None


def test_snapshot_is_isolated_from_caller_edits() -> None:
    backend = InMemoryBackend()
    task = Task(title="a")
    tasks = [task]
    backend.save(tasks)

    task.is_completed = True
    tasks.append(Task(title="b"))

    (stored,) = backend.load()
    assert stored.is_completed is False
    assert stored.id == task.id

    stored.title = "edited"
    assert backend.load()[0].title == "a"
