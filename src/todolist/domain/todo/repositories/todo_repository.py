from __future__ import annotations

from typing import Protocol, runtime_checkable

from todolist.domain.todo.entities.todo_list import TodoList


@runtime_checkable
class TodoListRepository(Protocol):
    """Repository interface for a whole persisted to-do list."""

    def load(self) -> TodoList:
        ...

    def save(self, todo_list: TodoList) -> None:
        ...
