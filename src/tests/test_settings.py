from __future__ import annotations

import logging
from pathlib import Path

import pytest

from todolist import env
from todolist.logging_setup import setup_logging
from todolist.settings import Settings, load_settings


def test_load_settings_defaults() -> None:
    assert load_settings({}) == Settings(todo_file=Path("todo.json"))


def test_load_settings_from_environment(tmp_path: Path) -> None:
    settings = load_settings(
        {
            "TODO_FILE": str(tmp_path / "list.json"),
            "TODO_AUTOSAVE": "1",
            "TODO_NO_COLOR": "true",
            "TODO_DEBUG": "yes",
            "TODO_LOG_DIR": str(tmp_path / "logs"),
        }
    )

    assert settings.todo_file == tmp_path / "list.json"
    assert settings.autosave is True
    assert settings.use_color is False
    assert settings.debug is True
    assert settings.log_dir == tmp_path / "logs"


def test_no_color_convention_disables_colors() -> None:
    assert load_settings({"NO_COLOR": "1"}).use_color is False


def test_load_env_reads_dotenv_without_overriding(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".env").write_text("TODO_FILE=from-dotenv.json\nTODO_AUTOSAVE=1\n", encoding="utf-8")
    monkeypatch.setattr(env, "_LOADED", False)
    # Registers TODO_FILE for restoration before load_dotenv sets it.
    monkeypatch.setenv("TODO_FILE", "placeholder")
    monkeypatch.delenv("TODO_FILE")
    monkeypatch.setenv("TODO_AUTOSAVE", "0")

    assert env.load_env(cwd=tmp_path) == tmp_path / ".env"
    settings = load_settings()

    assert settings.todo_file == Path("from-dotenv.json")
    assert settings.autosave is False
    assert env.load_env(cwd=tmp_path) is None


def test_setup_logging_writes_rotating_file(tmp_path: Path, clean_root_logger) -> None:
    setup_logging(Settings(debug=True, log_dir=tmp_path / "logs"))

    logging.getLogger("todolist.test").debug("hello log")
    for handler in clean_root_logger.handlers:
        handler.flush()

    assert clean_root_logger.level == logging.DEBUG
    assert "hello log" in (tmp_path / "logs" / "todolist.log").read_text(encoding="utf-8")

    setup_logging(Settings(debug=False))
    assert clean_root_logger.level == logging.INFO


def test_memory_sentinel_selects_in_memory_store() -> None:
    assert load_settings({"TODO_FILE": ":memory:"}).in_memory is True
    assert load_settings({}).in_memory is False
