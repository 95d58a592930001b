# src/kaizen/tasks/task_store.py

from __future__ import annotations

import itertools
import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import replace
from datetime import datetime
from typing import Any

from ..core.ports import Clock
from .task_models import (
    EDITABLE_FIELDS,
    Task,
    TaskNotFound,
    TaskStatus,
    ValidationError,
    as_local,
    check_invariants,
    clean_title,
)

logger = logging.getLogger(__name__)

IdFactory = Callable[[], str]


def local_now() -> datetime:
    return datetime.now().astimezone()


def counter_ids(start: int = 1) -> IdFactory:
    """Monotonic id factory: "1", "2", "3", ..."""
    counter = itertools.count(start)
    return lambda: str(next(counter))


class TaskStore:
    """
    In-memory task store.

    The store is the only owner and mutator of the task collection:
    - tasks are frozen; every mutation swaps in an updated copy
    - new tasks are prepended (most recent first), edits keep positions
    - done/not-done bookkeeping (completed_at) lives in one place: _apply()

    Nothing is persisted; the collection lives for one session.
    """

    def __init__(
        self,
        seed: Iterable[Task] = (),
        *,
        clock: Clock = local_now,
        id_factory: IdFactory | None = None,
        default_category: str = "general",
    ) -> None:
        self._clock = clock
        self._id_factory = id_factory or counter_ids()
        self._default_category = default_category
        self._tasks: list[Task] = []

        seen: set[str] = set()
        for task in seed:
            if task.id in seen:
                raise ValidationError(f"Duplicate task id in seed: {task.id!r}")
            check_invariants(task)
            seen.add(task.id)
            self._tasks.append(task)

        logger.info("TaskStore ready total=%s", len(self._tasks))

    @property
    def clock(self) -> Clock:
        return self._clock

    # ---- low-level helpers ----

    def _index_of(self, task_id: str) -> int:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        raise TaskNotFound(task_id)

    def _new_id(self) -> str:
        used = {t.id for t in self._tasks}
        while True:
            candidate = str(self._id_factory())
            if candidate not in used:
                return candidate
            logger.debug("Task id %s already taken; drawing another.", candidate)

    @staticmethod
    def _check_fields(data: Mapping[str, Any]) -> None:
        unknown = set(data) - EDITABLE_FIELDS
        if unknown:
            raise ValidationError(f"Unknown or read-only task fields: {', '.join(sorted(unknown))}")

    @staticmethod
    def _apply(task: Task, data: Mapping[str, Any], now: datetime) -> Task:
        """Merge editable fields into task and derive completed_at from the status change."""
        changes: dict[str, Any] = {"updated_at": now}

        if "title" in data:
            changes["title"] = clean_title(data["title"])
        if "description" in data:
            changes["description"] = str(data["description"] or "")
        if "category" in data:
            category = str(data["category"] or "").strip()
            if not category:
                raise ValidationError("category must not be empty")
            changes["category"] = category

        status = TaskStatus.parse(data["status"]) if "status" in data else task.status
        changes["status"] = status

        if status is not TaskStatus.DONE:
            changes["completed_at"] = None
        elif task.status is not TaskStatus.DONE:
            changes["completed_at"] = now

        return replace(task, **changes)

    # ---- public API ----

    def count_tasks(self) -> int:
        return len(self._tasks)

    def list_tasks(self) -> list[Task]:
        """Snapshot of the collection, most recent first."""
        return list(self._tasks)

    def get_task(self, task_id: str) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def create_task(self, data: Mapping[str, Any]) -> Task:
        self._check_fields(data)
        title = clean_title(data.get("title"))
        status = TaskStatus.parse(data.get("status") or TaskStatus.TODO)
        category = str(data.get("category") or "").strip() or self._default_category

        now = self._clock()
        task = Task(
            id=self._new_id(),
            title=title,
            description=str(data.get("description") or ""),
            category=category,
            status=status,
            created_at=now,
            updated_at=now,
            completed_at=now if status is TaskStatus.DONE else None,
        )
        self._tasks.insert(0, task)
        logger.debug(
            "Task created id=%s category=%s status=%s", task.id, task.category, task.status.value
        )
        return task

    def update_task(self, task_id: str, data: Mapping[str, Any]) -> Task:
        self._check_fields(data)
        try:
            idx = self._index_of(task_id)
        except TaskNotFound:
            logger.info("Update rejected: no task id=%s", task_id)
            raise
        old = self._tasks[idx]
        now = self._clock()
        if as_local(now) < as_local(old.created_at):
            # Clock behind a (seeded) creation time: never stamp before created_at.
            now = old.created_at
        updated = self._apply(old, data, now)
        self._tasks[idx] = updated
        logger.debug(
            "Task updated id=%s fields=%s status=%s->%s",
            task_id,
            ",".join(sorted(data)),
            old.status.value,
            updated.status.value,
        )
        return updated

    def set_status(self, task_id: str, status: TaskStatus | str) -> Task:
        return self.update_task(task_id, {"status": status})

    def delete_task(self, task_id: str) -> bool:
        """Remove a task. Deleting a missing id is a no-op and returns False."""
        try:
            idx = self._index_of(task_id)
        except TaskNotFound:
            logger.debug("Delete ignored: no task id=%s", task_id)
            return False
        del self._tasks[idx]
        logger.debug("Task deleted id=%s", task_id)
        return True
