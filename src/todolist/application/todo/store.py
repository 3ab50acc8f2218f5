from __future__ import annotations

import logging

from todolist.application.todo.errors import TodoStorageError, TodoWriteError
from todolist.domain.todo.entities.todo_list import TodoList
from todolist.domain.todo.repositories.todo_repository import TodoListRepository

logger = logging.getLogger(__name__)


class TodoStore:
    """One session's to-do list together with the repository backing it.

    Storage failures are logged and never abort the session: a failed load
    starts from an empty list, a failed save keeps the in-memory list and
    reports ``False``.
    """

    def __init__(self, repository: TodoListRepository, autosave: bool = False) -> None:
        self.repository = repository
        self.autosave = autosave
        self.todo_list = TodoList()
        self.dirty = False

    def load(self) -> TodoList:
        try:
            self.todo_list = self.repository.load()
        except TodoStorageError as exc:
            logger.warning("%s; starting with an empty list", exc)
            self.todo_list = TodoList()
        self.dirty = False
        return self.todo_list

    def save(self) -> bool:
        try:
            self.repository.save(self.todo_list)
        except TodoWriteError as exc:
            logger.error("%s", exc)
            return False
        self.dirty = False
        return True

    def mark_changed(self) -> None:
        self.dirty = True
        if self.autosave:
            self.save()
