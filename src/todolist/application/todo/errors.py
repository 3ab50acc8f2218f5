from todolist.domain.todo.exceptions.todo_exceptions import (
    TodoDecodeError,
    TodoError,
    TodoNotFoundError,
    TodoReadError,
    TodoStorageError,
    TodoTitleEmptyError,
    TodoWriteError,
)

__all__ = [
    "TodoDecodeError",
    "TodoError",
    "TodoNotFoundError",
    "TodoReadError",
    "TodoStorageError",
    "TodoTitleEmptyError",
    "TodoWriteError",
]
