from __future__ import annotations

from todolist.application.contracts.todo_dtos import RenameTodoRequest, TodoItemDto
from todolist.application.todo.errors import TodoNotFoundError, TodoTitleEmptyError
from todolist.application.todo.store import TodoStore


class RenameTodoCommand:
    def __init__(self, store: TodoStore) -> None:
        self._store = store

    def execute(self, request: RenameTodoRequest) -> TodoItemDto:
        title = (request.title or "").strip()
        new_title = (request.new_title or "").strip()
        if not new_title:
            raise TodoTitleEmptyError("New todo title cannot be empty.")
        todo_list = self._store.todo_list
        index = todo_list.find_index_by_title(title)
        if index is None:
            raise TodoNotFoundError(title)
        todo_list.rename(title, new_title)
        self._store.mark_changed()
        return TodoItemDto.from_item(todo_list.items()[index])
