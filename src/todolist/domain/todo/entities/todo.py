from __future__ import annotations

from dataclasses import dataclass, replace

from todolist.domain.todo.exceptions.todo_exceptions import TodoTitleEmptyError


@dataclass(frozen=True)
class TodoItem:
    title: str
    completed: bool = False

    def __post_init__(self) -> None:
        if not self.title or not self.title.strip():
            raise TodoTitleEmptyError("Todo title must not be empty.")

    def mark_completed(self) -> TodoItem:
        return replace(self, completed=True)

    def renamed(self, new_title: str) -> TodoItem:
        return replace(self, title=new_title)
