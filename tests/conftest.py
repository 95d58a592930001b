# tests/conftest.py

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from types import SimpleNamespace

import pytest

from kaizen.core.state import AppState
from kaizen.tasks.task_store import TaskStore

from .fakes import FakeClock

# Naive timestamps are read as local time, so calendar-day checks hold in any TZ.
DAY = datetime(2024, 5, 14, 9, 0, 0)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="kaizen-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        seed_path=None,
        demo_seed=False,
        default_category="general",
        console_enabled=False,
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock(DAY)


@pytest.fixture()
def store(clock: FakeClock) -> TaskStore:
    return TaskStore(clock=clock)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    return AppState(settings=settings, task_store=store)
