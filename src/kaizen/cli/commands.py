# src/kaizen/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..core.state import AppState
from ..tasks import task_api
from ..tasks.task_filter import ALL_CATEGORIES, list_categories
from ..tasks.task_models import Task, TaskError, TaskStatus, ValidationError

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)

STATUS_MARKS = {
    TaskStatus.TODO: "[ ]",
    TaskStatus.IN_PROGRESS: "[~]",
    TaskStatus.DONE: "[x]",
}


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /list, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        Task errors (validation, missing id) become a user-facing reply;
        anything else propagates to the connector.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            return handler(state, args)
        except TaskError as e:
            logger.debug("Command /%s rejected: %s", name, e)
            return f"Error: {e}"

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _ts(ts: datetime | None) -> str:
    if ts is None:
        return "-"
    return ts.astimezone().strftime("%Y-%m-%d %H:%M")


def format_task_line(task: Task, selected_id: str | None = None) -> str:
    pointer = ">" if task.id == selected_id else " "
    return f"{pointer} {STATUS_MARKS[task.status]} {task.id}  {task.title}  ({task.category})"


def format_task_detail(task: Task) -> str:
    lines = [
        f"{task.title}",
        f"  id:          {task.id}",
        f"  status:      {task.status.value}",
        f"  category:    {task.category}",
        f"  created:     {_ts(task.created_at)}",
        f"  updated:     {_ts(task.updated_at)}",
        f"  completed:   {_ts(task.completed_at)}",
    ]
    if task.description:
        lines.append(f"  description: {task.description}")
    return "\n".join(lines)


def _parse_edit_fields(text: str) -> dict[str, str]:
    """Parse "title=Buy oat milk; status=done" into a dict."""
    data: dict[str, str] = {}
    for chunk in text.split(";"):
        if not chunk.strip():
            continue
        if "=" not in chunk:
            raise ValidationError(f"Expected field=value, got {chunk.strip()!r}")
        key, value = chunk.split("=", 1)
        data[key.strip().lower()] = value.strip()
    return data


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    s = state.session
    tasks = task_api.visible_tasks(state)
    header = f"Tasks (search={s.search_term!r}, category={s.selected_category}): {len(tasks)}"
    if not tasks:
        return header + "\n  No tasks."
    lines = [header]
    lines.extend(format_task_line(t, s.selected_task_id) for t in tasks)
    return "\n".join(lines)


def cmd_search(state: AppState, args: list[str]) -> str:
    """
    /search         -> clear the search
    /search <term>  -> case-insensitive match on title or description
    """
    task_api.set_search(state, " ".join(args))
    term = state.session.search_term
    count = len(task_api.visible_tasks(state))
    if not term:
        return f"Search cleared ({count} visible)."
    return f"Search: {term!r} ({count} visible)."


def cmd_category(state: AppState, args: list[str]) -> str:
    task_api.set_category(state, " ".join(args) or ALL_CATEGORIES)
    count = len(task_api.visible_tasks(state))
    return f"Category: {state.session.selected_category} ({count} visible)."


def cmd_categories(state: AppState, args: list[str]) -> str:
    cats = list_categories(state.task_store.list_tasks())
    if not cats:
        return "No categories yet."
    return "Categories: " + ", ".join([ALL_CATEGORIES, *cats])


def cmd_new(state: AppState, args: list[str]) -> str:
    """
    /new title | description | category | status
    Everything after the title is optional.
    """
    text = " ".join(args)
    if not text.strip():
        return "Usage: /new title | description | category | status"

    parts = [p.strip() for p in text.split("|")]
    data: dict[str, str] = {"title": parts[0]}
    for key, value in zip(("description", "category", "status"), parts[1:]):
        if value:
            data[key] = value

    task_api.start_create(state)
    try:
        task = task_api.save_form(state, data)
    except TaskError:
        task_api.close_form(state)
        raise
    return f"Created task {task.id}: {task.title}"


def cmd_edit(state: AppState, args: list[str]) -> str:
    """/edit <id> field=value; field=value  (fields: title, description, category, status)"""
    if len(args) < 2:
        return "Usage: /edit <id> field=value; field=value"

    task_id = args[0]
    data = _parse_edit_fields(" ".join(args[1:]))
    if not data:
        return "Nothing to change."

    task_api.start_edit(state, task_id)
    try:
        task = task_api.save_form(state, data)
    except TaskError:
        task_api.close_form(state)
        raise
    return f"Updated task {task.id}: {task.title}"


def cmd_status(state: AppState, args: list[str]) -> str:
    if len(args) != 2:
        return "Usage: /status <id> <todo|in_progress|done>"
    task = task_api.change_status(state, args[0], args[1])
    return f"Task {task.id} is now {task.status.value}."


def cmd_done(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /done <id>"
    task = task_api.change_status(state, args[0], TaskStatus.DONE)
    return f"Task {task.id} is now {task.status.value}."


def cmd_delete(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /delete <id>"
    if task_api.delete_task(state, args[0]):
        return f"Task {args[0]} deleted."
    return f"No task {args[0]} (nothing to delete)."


def cmd_select(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /select <id>"
    task_api.select_task(state, args[0])
    task = task_api.selected_task(state)
    if task is None:
        return f"Selected {args[0]} (no such task)."
    return f"Selected task {task.id}: {task.title}"


def cmd_show(state: AppState, args: list[str]) -> str:
    if args:
        task = state.task_store.get_task(args[0])
        if task is None:
            return f"No task {args[0]}."
    else:
        task = task_api.selected_task(state)
        if task is None:
            return "Select a task to view details."
    return format_task_detail(task)


def cmd_progress(state: AppState, args: list[str]) -> str:
    p = task_api.daily_progress(state)
    return f"Today: {p.completed_today}/{p.total_today} done ({p.percentage:.0f}%)."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="List visible tasks (search + category).", aliases=["ls"])
registry.register("search", cmd_search, help_text="Filter by text: /search <term> | /search to clear.")
registry.register("category", cmd_category, help_text="Filter by category: /category <name> | /category all.")
registry.register("categories", cmd_categories, help_text="Show known categories.")
registry.register("new", cmd_new, help_text="Create: /new title | description | category | status.")
registry.register("edit", cmd_edit, help_text="Edit: /edit <id> title=...; category=...; status=...")
registry.register("status", cmd_status, help_text="Change status: /status <id> <todo|in_progress|done>.")
registry.register("done", cmd_done, help_text="Mark done: /done <id>.")
registry.register("delete", cmd_delete, help_text="Delete: /delete <id>.", aliases=["rm"])
registry.register("select", cmd_select, help_text="Select a task: /select <id>.")
registry.register("show", cmd_show, help_text="Show task details: /show [id] (default: selected).")
registry.register("progress", cmd_progress, help_text="Show today's completion progress.")
