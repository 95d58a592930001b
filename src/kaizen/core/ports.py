# src/kaizen/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the intent layer.

task_api depends on these Protocols instead of the concrete TaskStore,
so a UI can be wired to any store with the same operation set.
"""

from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any, Protocol

Clock = Callable[[], datetime]
# Source of "now". Injected so timestamps and progress are deterministic in tests.


class TaskRepo(Protocol):
    @property
    def clock(self) -> Clock: ...

    def list_tasks(self) -> list[Any]: ...
    def get_task(self, task_id: str) -> Any | None: ...
    def count_tasks(self) -> int: ...

    def create_task(self, data: Mapping[str, Any]) -> Any: ...
    def update_task(self, task_id: str, data: Mapping[str, Any]) -> Any: ...
    def set_status(self, task_id: str, status: Any) -> Any: ...
    def delete_task(self, task_id: str) -> bool: ...
