from __future__ import annotations

from todolist.application.contracts.todo_dtos import TodoItemDto
from todolist.application.todo.store import TodoStore


class ListTodosQuery:
    def __init__(self, store: TodoStore) -> None:
        self._store = store

    def execute(self) -> list[TodoItemDto]:
        return [TodoItemDto.from_item(item) for item in self._store.todo_list]
