from __future__ import annotations

from collections.abc import Iterable, Iterator

from todolist.domain.todo.entities.todo import TodoItem


class TodoList:
    """Ordered collection of to-do items.

    Titles are not unique. Every title lookup scans from the front and acts
    on the first exact, case-sensitive match. A miss is reported through the
    return value and never mutates the list.
    """

    def __init__(self, items: Iterable[TodoItem] | None = None) -> None:
        self._items: list[TodoItem] = list(items or [])

    def add(self, item: TodoItem) -> None:
        self._items.append(item)

    def find_index_by_title(self, title: str) -> int | None:
        for index, item in enumerate(self._items):
            if item.title == title:
                return index
        return None

    def get(self, title: str) -> TodoItem | None:
        index = self.find_index_by_title(title)
        if index is None:
            return None
        return self._items[index]

    def complete(self, title: str) -> bool:
        index = self.find_index_by_title(title)
        if index is None:
            return False
        self._items[index] = self._items[index].mark_completed()
        return True

    def rename(self, title: str, new_title: str) -> bool:
        index = self.find_index_by_title(title)
        if index is None:
            return False
        self._items[index] = self._items[index].renamed(new_title)
        return True

    def remove(self, title: str) -> bool:
        index = self.find_index_by_title(title)
        if index is None:
            return False
        del self._items[index]
        return True

    def items(self) -> list[TodoItem]:
        return list(self._items)

    def copy(self) -> TodoList:
        return TodoList(self._items)

    def __iter__(self) -> Iterator[TodoItem]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TodoList):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"TodoList({self._items!r})"
