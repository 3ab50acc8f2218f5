from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from todolist.application.todo.store import TodoStore
from todolist.domain.todo.repositories.todo_repository import TodoListRepository
from todolist.infrastructure.data.repositories.in_memory_todo_repository import (
    InMemoryTodoRepository,
)
from todolist.infrastructure.data.repositories.json_file_todo_repository import (
    JsonFileTodoRepository,
)
from todolist.presentation.cli.menu import TodoMenu
from todolist.presentation.controllers.todo_controller import TodoController
from todolist.settings import Settings


@dataclass(frozen=True)
class AppContainer:
    settings: Settings
    repository: TodoListRepository
    store: TodoStore
    controller: TodoController
    menu: TodoMenu


def create_app_container(
    settings: Settings | None = None,
    repository: TodoListRepository | None = None,
    read_line: Callable[[str], str] | None = None,
    write_line: Callable[[str], None] | None = None,
) -> AppContainer:
    settings = settings or Settings()
    if repository is None and settings.in_memory:
        repository = InMemoryTodoRepository()
    elif repository is None:
        repository = JsonFileTodoRepository(settings.todo_file)

    store = TodoStore(repository, autosave=settings.autosave)
    controller = TodoController(store)
    menu = TodoMenu(controller, read_line=read_line, write_line=write_line, use_color=settings.use_color)

    return AppContainer(
        settings=settings,
        repository=repository,
        store=store,
        controller=controller,
        menu=menu,
    )
