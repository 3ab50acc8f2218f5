from __future__ import annotations

from todolist.application.contracts.todo_dtos import (
    CompleteTodoRequest,
    CreateTodoRequest,
    DeleteTodoRequest,
    RenameTodoRequest,
)
from todolist.application.todo.commands.complete_todo import CompleteTodoCommand
from todolist.application.todo.commands.create_todo import CreateTodoCommand
from todolist.application.todo.commands.delete_todo import DeleteTodoCommand
from todolist.application.todo.commands.rename_todo import RenameTodoCommand
from todolist.application.todo.commands.save_todos import SaveTodosCommand
from todolist.application.todo.queries.find_todo import FindTodoQuery
from todolist.application.todo.queries.list_todos import ListTodosQuery
from todolist.application.todo.store import TodoStore

TodoDict = dict[str, bool | str]


class TodoController:
    """Plain-dict facade over the use cases, one instance per session."""

    def __init__(self, store: TodoStore) -> None:
        self.store = store
        self._create = CreateTodoCommand(store)
        self._complete = CompleteTodoCommand(store)
        self._rename = RenameTodoCommand(store)
        self._delete = DeleteTodoCommand(store)
        self._save = SaveTodosCommand(store)
        self._list = ListTodosQuery(store)
        self._find = FindTodoQuery(store)

    def create_todo(self, title: str) -> TodoDict:
        todo = self._create.execute(CreateTodoRequest(title=title))
        return {"title": todo.title, "completed": todo.completed}

    def complete_todo(self, title: str) -> TodoDict:
        todo = self._complete.execute(CompleteTodoRequest(title=title))
        return {"title": todo.title, "completed": todo.completed}

    def rename_todo(self, title: str, new_title: str) -> TodoDict:
        todo = self._rename.execute(RenameTodoRequest(title=title, new_title=new_title))
        return {"title": todo.title, "completed": todo.completed}

    def delete_todo(self, title: str) -> TodoDict:
        todo = self._delete.execute(DeleteTodoRequest(title=title))
        return {"title": todo.title, "completed": todo.completed}

    def has_unsaved_changes(self) -> bool:
        return self.store.dirty

    def has_todo(self, title: str) -> bool:
        return self._find.execute(title) is not None

    def save_todos(self) -> bool:
        return self._save.execute()

    def list_todos(self) -> list[TodoDict]:
        return [{"title": todo.title, "completed": todo.completed} for todo in self._list.execute()]
