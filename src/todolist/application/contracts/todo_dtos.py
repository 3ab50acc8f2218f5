from __future__ import annotations

from dataclasses import dataclass

from todolist.domain.todo.entities.todo import TodoItem


@dataclass(frozen=True)
class CreateTodoRequest:
    title: str


@dataclass(frozen=True)
class CompleteTodoRequest:
    title: str


@dataclass(frozen=True)
class RenameTodoRequest:
    title: str
    new_title: str


@dataclass(frozen=True)
class DeleteTodoRequest:
    title: str


@dataclass(frozen=True)
class TodoItemDto:
    title: str
    completed: bool

    @classmethod
    def from_item(cls, item: TodoItem) -> TodoItemDto:
        return cls(title=item.title, completed=item.completed)
