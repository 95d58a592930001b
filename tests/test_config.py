# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from kaizen.config import Settings


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in (
        "KAIZEN_APP_NAME",
        "KAIZEN_LOG_LEVEL",
        "KAIZEN_DATA_DIR",
        "KAIZEN_SEED_PATH",
        "KAIZEN_DEMO_SEED",
        "KAIZEN_DEFAULT_CATEGORY",
        "KAIZEN_CONSOLE_ENABLED",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env: pytest.MonkeyPatch) -> None:
    s = Settings.from_env()
    assert s.app_name == "kaizen"
    assert s.log_level == "INFO"
    assert s.data_dir == Path(".local/kaizen")
    assert s.seed_path is None
    assert s.demo_seed is True
    assert s.default_category == "general"
    assert s.console_enabled is True


def test_env_overrides(clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
    clean_env.setenv("KAIZEN_APP_NAME", "focus")
    clean_env.setenv("KAIZEN_DATA_DIR", str(tmp_path))
    clean_env.setenv("KAIZEN_SEED_PATH", str(tmp_path / "seed.json"))
    clean_env.setenv("KAIZEN_DEMO_SEED", "no")
    clean_env.setenv("KAIZEN_DEFAULT_CATEGORY", "  ")
    clean_env.setenv("KAIZEN_CONSOLE_ENABLED", "0")

    s = Settings.from_env()
    assert s.app_name == "focus"
    assert s.data_dir == tmp_path
    assert s.seed_path == tmp_path / "seed.json"
    assert s.demo_seed is False
    assert s.default_category == "general"
    assert s.console_enabled is False
