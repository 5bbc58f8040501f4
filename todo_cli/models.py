from __future__ import annotations

from typing import Annotated, Any, List
from uuid import UUID, uuid4

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationInfo,
    model_validator,
)

STORED_FIELDS = ("id", "title", "isCompleted")


class Task(BaseModel):
    """A single to-do item.

    Serialized with the labels ``id``, ``title`` and ``isCompleted``.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: UUID = Field(default_factory=uuid4, frozen=True)
    title: str
    is_completed: bool = Field(default=False, alias="isCompleted")

    @model_validator(mode="before")
    @classmethod
    def _require_stored_fields(cls, data: Any, info: ValidationInfo) -> Any:
        # Stored records must carry every field; defaults apply to new tasks only.
        if info.context and info.context.get("stored") and isinstance(data, dict):
            missing = [name for name in STORED_FIELDS if name not in data]
            if missing:
                raise ValueError(f"missing stored field(s): {', '.join(missing)}")
        return data

    def __str__(self) -> str:
        return f"{self.title} - {'✅' if self.is_completed else '❌'}"


def _require_unique_ids(tasks: List[Task]) -> List[Task]:
    seen = set()
    for task in tasks:
        if task.id in seen:
            raise ValueError(f"duplicate task id: {task.id}")
        seen.add(task.id)
    return tasks


# Encodes/decodes a whole snapshot (JSON array of tasks)
TaskList = TypeAdapter(Annotated[List[Task], AfterValidator(_require_unique_ids)])


def dump_tasks(tasks: List[Task]) -> bytes:
    return TaskList.dump_json(tasks, by_alias=True, indent=2)


def parse_tasks(data: str | bytes) -> List[Task]:
    return TaskList.validate_json(data, strict=True, context={"stored": True})
