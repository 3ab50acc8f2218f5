from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from todolist.domain.todo.entities.todo import TodoItem
from todolist.domain.todo.entities.todo_list import TodoList
from todolist.domain.todo.exceptions.todo_exceptions import (
    TodoDecodeError,
    TodoReadError,
    TodoTitleEmptyError,
    TodoWriteError,
)

logger = logging.getLogger(__name__)

DEFAULT_TODO_FILE = "todo.json"
_INDENT = 2


def encode_todo_list(todo_list: TodoList) -> str:
    payload = [{"title": item.title, "completed": item.completed} for item in todo_list]
    return json.dumps(payload, indent=_INDENT, ensure_ascii=False)


def _decode_item(raw: Any, position: int) -> TodoItem:
    if not isinstance(raw, dict):
        raise ValueError(f"entry {position} is not an object")
    title = raw.get("title")
    if not isinstance(title, str):
        raise ValueError(f"entry {position} has no string 'title'")
    completed = raw.get("completed", False)
    if not isinstance(completed, bool):
        raise ValueError(f"entry {position} has a non-boolean 'completed'")
    try:
        return TodoItem(title=title, completed=completed)
    except TodoTitleEmptyError as exc:
        raise ValueError(f"entry {position} has an empty 'title'") from exc


def decode_todo_list(content: str) -> TodoList:
    """Decode a JSON document into a ``TodoList``.

    ``null`` decodes as the empty list, a missing ``completed`` key as
    ``False``. Unknown keys are ignored. Raises ``ValueError`` (including
    ``json.JSONDecodeError``) when the document has the wrong shape.
    """
    data = json.loads(content)
    if data is None:
        return TodoList()
    if not isinstance(data, list):
        raise ValueError("top-level value is not an array")
    return TodoList(_decode_item(raw, position) for position, raw in enumerate(data))


class JsonFileTodoRepository:
    """Stores the whole list as one indented JSON array on disk."""

    def __init__(self, path: Path | str = DEFAULT_TODO_FILE) -> None:
        self.path = Path(path)

    def load(self) -> TodoList:
        try:
            content = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise TodoReadError(self.path, "Failed to read to-do list") from exc
        try:
            todo_list = decode_todo_list(content)
        except (ValueError, RecursionError) as exc:
            raise TodoDecodeError(self.path, f"Failed to decode to-do list ({exc})") from exc
        logger.debug("Loaded %d todos from %s", len(todo_list), self.path)
        return todo_list

    def save(self, todo_list: TodoList) -> None:
        try:
            payload = encode_todo_list(todo_list).encode("utf-8")
        except UnicodeEncodeError as exc:
            raise TodoWriteError(self.path, "Failed to encode to-do list") from exc

        tmp_path = self.path.with_name(f"{self.path.name}.tmp")
        try:
            with open(tmp_path, "wb") as handle:
                handle.write(payload)
            os.replace(tmp_path, self.path)
        except OSError as exc:
            raise TodoWriteError(self.path, "Failed to save to-do list") from exc
        finally:
            if tmp_path.exists():
                tmp_path.unlink()
        logger.debug("Saved %d todos to %s", len(todo_list), self.path)
