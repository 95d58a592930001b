# src/kaizen/core/session.py

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from ..tasks.task_filter import ALL_CATEGORIES


class FormMode(StrEnum):
    CLOSED = "closed"
    CREATING = "creating"
    EDITING = "editing"


@dataclass(frozen=True, slots=True)
class FormSession:
    mode: FormMode = FormMode.CLOSED
    task_id: str | None = None  # set only while EDITING

    @property
    def is_open(self) -> bool:
        return self.mode is not FormMode.CLOSED


CLOSED_FORM = FormSession()


@dataclass(slots=True)
class SessionState:
    """
    Ephemeral UI state: selection, open form, search and category filter.

    Never validated against the store. A stale selection simply resolves
    to "nothing selected" (see task_api.selected_task).
    """

    selected_task_id: str | None = None
    form: FormSession = field(default=CLOSED_FORM)
    search_term: str = ""
    selected_category: str = ALL_CATEGORIES

    def select(self, task_id: str | None) -> None:
        self.selected_task_id = task_id

    def clear_selection_if(self, task_id: str) -> None:
        if self.selected_task_id == task_id:
            self.selected_task_id = None

    def start_create(self) -> None:
        self.form = FormSession(FormMode.CREATING)

    def start_edit(self, task_id: str) -> None:
        self.form = FormSession(FormMode.EDITING, task_id)

    def close_form(self) -> None:
        self.form = CLOSED_FORM

    def set_search(self, term: str | None) -> None:
        self.search_term = term or ""

    def set_category(self, category: str | None) -> None:
        self.selected_category = (category or "").strip() or ALL_CATEGORIES
