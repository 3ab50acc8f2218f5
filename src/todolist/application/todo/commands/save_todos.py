from __future__ import annotations

from todolist.application.todo.store import TodoStore


class SaveTodosCommand:
    def __init__(self, store: TodoStore) -> None:
        self._store = store

    def execute(self) -> bool:
        return self._store.save()
