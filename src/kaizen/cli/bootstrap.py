# src/kaizen/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) log directory exists,
- picks the seed collection (file > demo set > empty),
- wires the TaskStore into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import Clock
from ..core.state import AppState
from ..tasks.seed import demo_tasks, load_seed_file
from ..tasks.task_models import Task
from ..tasks.task_store import TaskStore, local_now

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)


def load_seed(settings, *, clock: Clock = local_now) -> list[Task]:
    seed_path = getattr(settings, "seed_path", None)
    if seed_path:
        return load_seed_file(seed_path, default_category=settings.default_category)
    if getattr(settings, "demo_seed", False):
        tasks = demo_tasks(clock())
        logger.info("Seeded %d demo tasks.", len(tasks))
        return tasks
    return []


def create_initial_state(*, settings=None, clock: Clock = local_now) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings (and the clock) injectable makes the app easy to test.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = TaskStore(
        load_seed(settings, clock=clock),
        clock=clock,
        default_category=settings.default_category,
    )
    return AppState(settings=settings, task_store=store)
