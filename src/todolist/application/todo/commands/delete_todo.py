from __future__ import annotations

from todolist.application.contracts.todo_dtos import DeleteTodoRequest, TodoItemDto
from todolist.application.todo.errors import TodoNotFoundError
from todolist.application.todo.store import TodoStore


class DeleteTodoCommand:
    def __init__(self, store: TodoStore) -> None:
        self._store = store

    def execute(self, request: DeleteTodoRequest) -> TodoItemDto:
        title = (request.title or "").strip()
        todo_list = self._store.todo_list
        item = todo_list.get(title)
        if item is None:
            raise TodoNotFoundError(title)
        todo_list.remove(title)
        self._store.mark_changed()
        return TodoItemDto.from_item(item)
