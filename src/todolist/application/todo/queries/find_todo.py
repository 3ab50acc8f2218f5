from __future__ import annotations

from todolist.application.contracts.todo_dtos import TodoItemDto
from todolist.application.todo.store import TodoStore


class FindTodoQuery:
    def __init__(self, store: TodoStore) -> None:
        self._store = store

    def execute(self, title: str) -> TodoItemDto | None:
        item = self._store.todo_list.get((title or "").strip())
        if item is None:
            return None
        return TodoItemDto.from_item(item)
