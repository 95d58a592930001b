# src/kaizen/tasks/task_models.py

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any

EDITABLE_FIELDS = frozenset({"title", "description", "category", "status"})


class TaskError(Exception):
    """Base class for task engine errors."""


class ValidationError(TaskError, ValueError):
    """Rejected input; the store is left unchanged."""


class TaskNotFound(TaskError, LookupError):
    def __init__(self, task_id: str) -> None:
        super().__init__(f"Task {task_id!r} not found.")
        self.task_id = task_id


class FormClosedError(TaskError):
    """Save requested while no create/edit session is open."""


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    Any status may move to any other; there is no terminal state.
    Entering DONE stamps completed_at, leaving it clears it.
    """

    TODO = "todo"
    IN_PROGRESS = "in_progress"
    DONE = "done"

    @classmethod
    def parse(cls, raw: TaskStatus | str | None) -> TaskStatus:
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            raise ValidationError(f"Invalid status: {raw!r}")
        key = raw.strip().lower().replace("-", "_").replace(" ", "_")
        try:
            return cls(key)
        except ValueError:
            allowed = ", ".join(s.value for s in cls)
            raise ValidationError(f"Invalid status: {raw!r} (expected one of: {allowed})") from None


@dataclass(frozen=True, slots=True)
class Task:
    id: str
    title: str
    description: str
    category: str
    status: TaskStatus
    created_at: datetime
    updated_at: datetime
    completed_at: datetime | None = None

    @property
    def is_done(self) -> bool:
        return self.status is TaskStatus.DONE

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "category": self.category,
            "status": self.status.value,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
        }


def clean_title(raw: Any) -> str:
    title = raw.strip() if isinstance(raw, str) else ""
    if not title:
        raise ValidationError("title is required")
    return title


def as_local(ts: datetime) -> datetime:
    # Naive timestamps are taken as local time, so naive and aware values compare.
    return ts.astimezone()


def check_invariants(task: Task) -> None:
    """Raise ValidationError if a task breaks the timestamp/status invariants."""
    if as_local(task.updated_at) < as_local(task.created_at):
        raise ValidationError(f"Task {task.id!r}: updated_at precedes created_at")
    if task.is_done != (task.completed_at is not None):
        raise ValidationError(f"Task {task.id!r}: completed_at must be set iff status is done")


def _parse_ts(raw: Any, field_name: str) -> datetime | None:
    if raw is None or raw == "":
        return None
    if isinstance(raw, datetime):
        return raw
    if not isinstance(raw, str):
        raise ValidationError(f"{field_name}: expected ISO-8601 string, got {raw!r}")
    try:
        return datetime.fromisoformat(raw)
    except ValueError:
        raise ValidationError(f"{field_name}: invalid timestamp {raw!r}") from None


def task_from_dict(raw: Mapping[str, Any], *, default_category: str = "general") -> Task:
    """Build a Task from a seed mapping (ISO-8601 timestamps), enforcing invariants."""
    if not isinstance(raw, Mapping):
        raise ValidationError(f"Task record must be an object, got {type(raw).__name__}")

    task_id = raw.get("id")
    if task_id is None or str(task_id).strip() == "":
        raise ValidationError("id is required")

    created_at = _parse_ts(raw.get("created_at"), "created_at")
    if created_at is None:
        raise ValidationError("created_at is required")
    updated_at = _parse_ts(raw.get("updated_at"), "updated_at") or created_at

    task = Task(
        id=str(task_id).strip(),
        title=clean_title(raw.get("title")),
        description=str(raw.get("description") or ""),
        category=str(raw.get("category") or default_category),
        status=TaskStatus.parse(raw.get("status") or TaskStatus.TODO),
        created_at=created_at,
        updated_at=updated_at,
        completed_at=_parse_ts(raw.get("completed_at"), "completed_at"),
    )
    check_invariants(task)
    return task
