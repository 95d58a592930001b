# src/kaizen/tasks/task_progress.py

from __future__ import annotations

"""
Daily progress indicator.

The two counters are day-scoped independently:
- total_today counts tasks CREATED on the reference day
- completed_today counts tasks COMPLETED on the reference day
A task created yesterday and finished today adds to completed_today only,
so percentage is "today's completions over today's creations" and may exceed 100.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime

from .task_models import Task, TaskStatus, as_local


@dataclass(frozen=True, slots=True)
class DailyProgress:
    completed_today: int
    total_today: int
    percentage: float


def local_date(ts: datetime) -> date:
    return as_local(ts).date()


def is_same_day(a: datetime | None, b: datetime) -> bool:
    if a is None:
        return False
    return local_date(a) == local_date(b)


def compute_progress(tasks: Iterable[Task], reference: datetime) -> DailyProgress:
    completed = 0
    total = 0
    for t in tasks:
        if is_same_day(t.created_at, reference):
            total += 1
        if t.status is TaskStatus.DONE and is_same_day(t.completed_at, reference):
            completed += 1

    percentage = (completed / total) * 100 if total > 0 else 0.0
    return DailyProgress(completed_today=completed, total_today=total, percentage=percentage)
