# tests/test_seed.py

from __future__ import annotations

import json
from pathlib import Path

import pytest

from kaizen.cli.bootstrap import create_initial_state, load_seed
from kaizen.tasks.seed import demo_tasks, load_seed_file
from kaizen.tasks.task_models import TaskStatus, ValidationError
from kaizen.tasks.task_progress import compute_progress
from kaizen.tasks.task_store import TaskStore

from .conftest import DAY


def test_demo_tasks_are_valid_seed() -> None:
    tasks = demo_tasks(DAY)
    store = TaskStore(tasks)
    assert store.list_tasks() == tasks

    p = compute_progress(tasks, DAY)
    # one demo task was created yesterday and completed today
    assert p.completed_today == 2
    assert p.total_today == 2


def test_load_seed_file_round_trips_task_shape(tmp_path: Path) -> None:
    original = demo_tasks(DAY)
    path = tmp_path / "seed.json"
    path.write_text(json.dumps([t.to_dict() for t in original]), "utf-8")

    loaded = load_seed_file(path)
    assert loaded == original


def test_load_seed_file_fills_defaults(tmp_path: Path) -> None:
    path = tmp_path / "seed.json"
    path.write_text(
        json.dumps([{"id": 7, "title": "Minimal", "created_at": "2024-05-14T08:00:00"}]),
        "utf-8",
    )

    (task,) = load_seed_file(path, default_category="inbox")
    assert task.id == "7"
    assert task.category == "inbox"
    assert task.status is TaskStatus.TODO
    assert task.updated_at == task.created_at
    assert task.completed_at is None


@pytest.mark.parametrize(
    "payload",
    [
        b"not json",
        b"[\xff\xfe]",
        json.dumps({"id": "1"}).encode(),
        json.dumps([{"id": "1", "title": "", "created_at": "2024-05-14T08:00:00"}]).encode(),
        json.dumps([{"id": "1", "title": "x"}]).encode(),
        json.dumps([{"id": "1", "title": "x", "created_at": "yesterday"}]).encode(),
        json.dumps([{"id": "1", "title": "x", "status": "done", "created_at": "2024-05-14T08:00:00"}]).encode(),
        # aware created_at, naive updated_at a day earlier
        json.dumps(
            [
                {
                    "id": "1",
                    "title": "x",
                    "created_at": "2024-05-14T08:00:00+00:00",
                    "updated_at": "2024-05-13T09:00:00",
                }
            ]
        ).encode(),
    ],
)
def test_load_seed_file_rejects_malformed(tmp_path: Path, payload: bytes) -> None:
    path = tmp_path / "seed.json"
    path.write_bytes(payload)
    with pytest.raises(ValidationError):
        load_seed_file(path)


def test_load_seed_prefers_file_over_demo(settings, tmp_path: Path, clock) -> None:
    assert load_seed(settings, clock=clock) == []

    settings.demo_seed = True
    assert [t.id for t in load_seed(settings, clock=clock)] == [t.id for t in demo_tasks(DAY)]

    path = tmp_path / "seed.json"
    path.write_text(json.dumps([{"id": "a", "title": "From file", "created_at": "2024-05-14T08:00:00"}]), "utf-8")
    settings.seed_path = path
    assert [t.id for t in load_seed(settings, clock=clock)] == ["a"]


def test_create_initial_state_wires_store(settings, clock) -> None:
    settings.demo_seed = True
    state = create_initial_state(settings=settings, clock=clock)

    assert settings.data_dir.is_dir()
    assert state.task_store.count_tasks() == len(demo_tasks(DAY))
    assert state.session.selected_task_id is None

    task = state.task_store.create_task({"title": "New"})
    assert task.created_at == DAY
    assert task.category == "general"


def test_load_seed_file_accepts_mixed_naive_and_aware_timestamps(tmp_path: Path) -> None:
    path = tmp_path / "seed.json"
    path.write_text(
        json.dumps(
            [
                {
                    "id": "m",
                    "title": "Mixed",
                    "status": "done",
                    "created_at": "2024-05-14T08:00:00",
                    "updated_at": "2024-05-15T12:00:00+00:00",
                    "completed_at": "2024-05-15T12:00:00+00:00",
                }
            ]
        ),
        "utf-8",
    )

    (task,) = load_seed_file(path)
    store = TaskStore([task])
    assert store.get_task("m") == task
    assert compute_progress([task], task.completed_at).completed_today == 1
