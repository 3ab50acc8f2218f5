from __future__ import annotations

from pathlib import Path


class TodoError(Exception):
    """Base class for every error raised by the to-do list."""


class TodoTitleEmptyError(TodoError, ValueError):
    pass


class TodoNotFoundError(TodoError, LookupError):
    def __init__(self, title: str) -> None:
        super().__init__(f"Item {title!r} was not found.")
        self.title = title


class TodoStorageError(TodoError):
    """A to-do file could not be read, decoded or written."""

    def __init__(self, path: Path | str, message: str) -> None:
        super().__init__(f"{message}: {path}")
        self.path = Path(path)


class TodoReadError(TodoStorageError):
    pass


class TodoDecodeError(TodoStorageError):
    pass


class TodoWriteError(TodoStorageError):
    pass
