from __future__ import annotations

from collections.abc import Iterable

from todolist.domain.todo.entities.todo import TodoItem
from todolist.domain.todo.entities.todo_list import TodoList


class InMemoryTodoRepository:
    """Keeps the last saved list in memory; selected with ``TODO_FILE=:memory:``."""

    def __init__(self, initial_items: Iterable[TodoItem] | None = None) -> None:
        self._saved = TodoList(initial_items)

    def load(self) -> TodoList:
        return self._saved.copy()

    def save(self, todo_list: TodoList) -> None:
        self._saved = todo_list.copy()
