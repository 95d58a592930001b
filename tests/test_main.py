# tests/test_main.py

from __future__ import annotations

import logging
from pathlib import Path
from types import SimpleNamespace

import pytest

from kaizen.cli import main as cli_main
from kaizen.connectors.console_connector import run_console_loop
from kaizen.core.state import AppState
from kaizen.logging_setup import setup_logging


@pytest.fixture()
def quiet_main(monkeypatch: pytest.MonkeyPatch, settings: SimpleNamespace) -> SimpleNamespace:
    """main() wired to the test settings, without touching the root logger."""
    calls: list[dict] = []
    monkeypatch.setattr(cli_main, "get_settings", lambda: settings)
    monkeypatch.setattr(cli_main, "setup_logging", lambda **kw: calls.append(kw))
    settings.logging_calls = calls
    return settings


def _feed_input(monkeypatch: pytest.MonkeyPatch, lines: list[str]) -> None:
    it = iter(lines)

    def fake_input(prompt: str = "") -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


@pytest.mark.parametrize(
    "payload",
    [
        b"[\xff\xfe]",
        b'[{"id": "1", "title": "x", "created_at": "2024-05-14T08:00:00+00:00",'
        b' "updated_at": "2024-05-13T09:00:00"}]',
        b"{not json",
    ],
)
def test_main_returns_1_on_bad_seed_file(quiet_main: SimpleNamespace, tmp_path: Path, payload: bytes) -> None:
    seed = tmp_path / "seed.json"
    seed.write_bytes(payload)
    quiet_main.seed_path = seed

    assert cli_main.main() == 1


def test_main_returns_1_on_missing_seed_file(quiet_main: SimpleNamespace, tmp_path: Path) -> None:
    quiet_main.seed_path = tmp_path / "missing.json"
    assert cli_main.main() == 1


def test_main_without_console_returns_0(quiet_main: SimpleNamespace) -> None:
    quiet_main.demo_seed = True

    assert cli_main.main() == 0
    (kw,) = quiet_main.logging_calls
    assert kw["app_name"] == "kaizen-test"
    assert kw["log_dir"] == quiet_main.data_dir
    assert kw["console_level"] == logging.DEBUG


def test_main_runs_console_until_eof(
    quiet_main: SimpleNamespace, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    quiet_main.console_enabled = True
    _feed_input(monkeypatch, ["/new Call mom | | family", "/list"])

    assert cli_main.main() == 0

    out = capsys.readouterr().out
    assert "Created task 1: Call mom" in out
    assert "Call mom  (family)" in out


def test_console_loop_handles_commands_and_exit(
    state: AppState, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _feed_input(monkeypatch, ["", "hello", "/new Water plants", "/progress", "/exit", "/new Never"])

    run_console_loop(state)

    out = capsys.readouterr().out
    assert "0/0 done today" in out
    assert "Commands start with '/'" in out
    assert "Created task 1: Water plants" in out
    assert "Today: 0/1 done (0%)." in out
    assert state.task_store.count_tasks() == 1


def test_console_loop_reports_crashing_command(
    state: AppState, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    def boom(*_args):
        raise RuntimeError("boom")

    monkeypatch.setattr(state.task_store, "create_task", boom)
    _feed_input(monkeypatch, ["/new Anything"])

    run_console_loop(state)

    assert "Internal error while handling a command." in capsys.readouterr().out


def test_setup_logging_names_log_file_after_app(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    try:
        setup_logging(log_dir=tmp_path, app_name="Focus Board")
        logging.getLogger("kaizen.test").debug("hello file")
        for h in root.handlers:
            h.flush()

        log_file = tmp_path / "Focus-Board.log"
        assert log_file.exists()
        assert "hello file" in log_file.read_text("utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)
        logging.captureWarnings(False)
