from __future__ import annotations

from todolist.application.contracts.todo_dtos import CreateTodoRequest, TodoItemDto
from todolist.application.todo.errors import TodoTitleEmptyError
from todolist.application.todo.store import TodoStore
from todolist.domain.todo.entities.todo import TodoItem


class CreateTodoCommand:
    def __init__(self, store: TodoStore) -> None:
        self._store = store

    def execute(self, request: CreateTodoRequest) -> TodoItemDto:
        title = (request.title or "").strip()
        if not title:
            raise TodoTitleEmptyError("Todo title cannot be empty.")
        item = TodoItem(title=title)
        self._store.todo_list.add(item)
        self._store.mark_changed()
        return TodoItemDto.from_item(item)
