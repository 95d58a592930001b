# src/kaizen/tasks/task_api.py

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from ..core.session import FormMode
from ..core.state import AppState
from .task_filter import filter_tasks
from .task_models import FormClosedError, Task, TaskStatus
from .task_progress import DailyProgress, compute_progress

logger = logging.getLogger(__name__)


def select_task(state: AppState, task_id: str | None) -> None:
    state.session.select(task_id)


def selected_task(state: AppState) -> Task | None:
    """Resolve the selection; a stale or deleted id resolves to None."""
    task_id = state.session.selected_task_id
    if task_id is None:
        return None
    return state.task_store.get_task(task_id)


def start_create(state: AppState) -> None:
    state.session.start_create()


def start_edit(state: AppState, task_id: str) -> None:
    state.session.start_edit(task_id)


def close_form(state: AppState) -> None:
    state.session.close_form()


def save_form(state: AppState, data: Mapping[str, Any]) -> Task:
    """
    Commit the open form.

    editing(id) -> update the task, select it
    creating    -> create a task, select it
    The form closes only after a successful save; store errors propagate
    with the form still open so the caller can correct and resubmit.
    """
    form = state.session.form

    if form.mode is FormMode.EDITING and form.task_id is not None:
        task = state.task_store.update_task(form.task_id, data)
    elif form.mode is FormMode.CREATING:
        task = state.task_store.create_task(data)
    else:
        raise FormClosedError("No create/edit form is open.")

    state.session.select(task.id)
    state.session.close_form()
    logger.debug("Form saved mode=%s task_id=%s", form.mode.value, task.id)
    return task


def delete_task(state: AppState, task_id: str) -> bool:
    """Delete through the store and drop the selection if it pointed at the task."""
    removed = state.task_store.delete_task(task_id)
    state.session.clear_selection_if(task_id)
    return removed


def change_status(state: AppState, task_id: str, status: TaskStatus | str) -> Task:
    return state.task_store.set_status(task_id, status)


def set_search(state: AppState, term: str | None) -> None:
    state.session.set_search(term)


def set_category(state: AppState, category: str | None) -> None:
    state.session.set_category(category)


def visible_tasks(state: AppState) -> list[Task]:
    s = state.session
    return filter_tasks(state.task_store.list_tasks(), s.search_term, s.selected_category)


def daily_progress(state: AppState, reference: datetime | None = None) -> DailyProgress:
    if reference is None:
        reference = state.task_store.clock()
    return compute_progress(state.task_store.list_tasks(), reference)
