# src/kaizen/tasks/task_filter.py

from __future__ import annotations

from collections.abc import Iterable

from .task_models import Task

ALL_CATEGORIES = "all"


def _matches_search(task: Task, needle: str) -> bool:
    if not needle:
        return True
    return needle in task.title.lower() or needle in task.description.lower()


def filter_tasks(
    tasks: Iterable[Task],
    search_term: str = "",
    category: str = ALL_CATEGORIES,
) -> list[Task]:
    """
    Visible subset of tasks.

    - search_term: case-insensitive substring of title OR description ("" matches all)
    - category: "all" or an exact category tag
    Both must match. Input order is kept; nothing is re-sorted.
    """
    needle = (search_term or "").lower()
    return [
        t
        for t in tasks
        if _matches_search(t, needle) and (category == ALL_CATEGORIES or t.category == category)
    ]


def list_categories(tasks: Iterable[Task]) -> list[str]:
    """Distinct categories in first-seen order."""
    seen: dict[str, None] = {}
    for t in tasks:
        seen.setdefault(t.category, None)
    return list(seen)
