# src/kaizen/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from .ports import TaskRepo
from .session import SessionState


@dataclass
class AppState:
    # Settings are kept on the state so commands can read them (app name, defaults).
    settings: object

    task_store: TaskRepo
    session: SessionState = field(default_factory=SessionState)
