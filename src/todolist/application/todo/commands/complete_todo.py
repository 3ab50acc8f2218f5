from __future__ import annotations

from todolist.application.contracts.todo_dtos import CompleteTodoRequest, TodoItemDto
from todolist.application.todo.errors import TodoNotFoundError
from todolist.application.todo.store import TodoStore


class CompleteTodoCommand:
    def __init__(self, store: TodoStore) -> None:
        self._store = store

    def execute(self, request: CompleteTodoRequest) -> TodoItemDto:
        title = (request.title or "").strip()
        todo_list = self._store.todo_list
        if not todo_list.complete(title):
            raise TodoNotFoundError(title)
        self._store.mark_changed()
        return TodoItemDto.from_item(todo_list.get(title))
