# src/kaizen/tasks/seed.py

"""
Initial task collection for a session.

Either a small built-in demo set (timestamps relative to "now", so the
progress indicator has something to show) or a JSON file with an array
of task objects in the Task.to_dict() shape.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timedelta
from pathlib import Path

from .task_models import Task, TaskStatus, ValidationError, task_from_dict

logger = logging.getLogger(__name__)


def demo_tasks(now: datetime) -> list[Task]:
    yesterday = now - timedelta(days=1)
    last_week = now - timedelta(days=7)
    early = now - timedelta(minutes=45)

    return [
        Task(
            id="demo-1",
            title="Plan the week",
            description="Review goals and block time for deep work.",
            category="personal",
            status=TaskStatus.IN_PROGRESS,
            created_at=early,
            updated_at=early,
        ),
        Task(
            id="demo-2",
            title="Reply to project emails",
            description="Clear the inbox before the standup.",
            category="work",
            status=TaskStatus.DONE,
            created_at=early,
            updated_at=now,
            completed_at=now,
        ),
        Task(
            id="demo-3",
            title="Buy groceries",
            description="Milk, eggs, spinach, coffee beans.",
            category="shopping",
            status=TaskStatus.TODO,
            created_at=yesterday,
            updated_at=yesterday,
        ),
        Task(
            id="demo-4",
            title="Fix the bike brakes",
            description="Rear pads are worn out.",
            category="personal",
            status=TaskStatus.DONE,
            created_at=yesterday,
            updated_at=now,
            completed_at=now,
        ),
        Task(
            id="demo-5",
            title="Write quarterly report",
            description="Summarize metrics and next steps for the team.",
            category="work",
            status=TaskStatus.TODO,
            created_at=last_week,
            updated_at=yesterday,
        ),
    ]


def load_seed_file(path: str | Path, *, default_category: str = "general") -> list[Task]:
    path = Path(path)
    try:
        data = json.loads(path.read_text("utf-8"))
    except UnicodeDecodeError as e:
        raise ValidationError(f"Seed file {path} is not valid UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        raise ValidationError(f"Seed file {path} is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise ValidationError(f"Seed file {path} must contain a JSON array of tasks")

    tasks = [task_from_dict(raw, default_category=default_category) for raw in data]
    logger.info("Loaded seed tasks: %d from %s", len(tasks), path)
    return tasks
