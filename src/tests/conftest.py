from __future__ import annotations

import logging
from pathlib import Path
import sys

import pytest

ROOT = Path(__file__).resolve().parents[2]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from todolist.application.todo.store import TodoStore
from todolist.infrastructure.data.repositories.in_memory_todo_repository import (
    InMemoryTodoRepository,
)
from todolist.infrastructure.data.repositories.json_file_todo_repository import (
    JsonFileTodoRepository,
)


@pytest.fixture()
def in_memory_todo_repo() -> InMemoryTodoRepository:
    return InMemoryTodoRepository()


@pytest.fixture()
def todo_store(in_memory_todo_repo: InMemoryTodoRepository) -> TodoStore:
    store = TodoStore(in_memory_todo_repo)
    store.load()
    return store


@pytest.fixture()
def todo_file(tmp_path: Path) -> Path:
    return tmp_path / "todo.json"


@pytest.fixture()
def json_todo_repo(todo_file: Path) -> JsonFileTodoRepository:
    return JsonFileTodoRepository(todo_file)


@pytest.fixture()
def clean_root_logger():
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
    if hasattr(root_logger, "_todolist_logging_configured"):
        del root_logger._todolist_logging_configured
