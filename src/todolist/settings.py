from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from todolist.infrastructure.data.repositories.json_file_todo_repository import DEFAULT_TODO_FILE

_TRUE_VALUES = {"1", "true", "yes", "on"}
MEMORY_TODO_FILE = ":memory:"


def _flag(environ: Mapping[str, str], name: str) -> bool:
    return (environ.get(name) or "").strip().lower() in _TRUE_VALUES


@dataclass(frozen=True)
class Settings:
    todo_file: Path = Path(DEFAULT_TODO_FILE)
    autosave: bool = False
    use_color: bool = True
    debug: bool = False
    log_dir: Path | None = None

    @property
    def in_memory(self) -> bool:
        return str(self.todo_file) == MEMORY_TODO_FILE


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    if environ is None:
        environ = os.environ
    todo_file = (environ.get("TODO_FILE") or "").strip() or DEFAULT_TODO_FILE
    log_dir = (environ.get("TODO_LOG_DIR") or "").strip()
    no_color = _flag(environ, "TODO_NO_COLOR") or bool(environ.get("NO_COLOR"))
    return Settings(
        todo_file=Path(todo_file),
        autosave=_flag(environ, "TODO_AUTOSAVE"),
        use_color=not no_color,
        debug=_flag(environ, "TODO_DEBUG"),
        log_dir=Path(log_dir) if log_dir else None,
    )
