from __future__ import annotations

import pytest

from todolist.domain.todo.entities.todo import TodoItem
from todolist.domain.todo.entities.todo_list import TodoList
from todolist.domain.todo.exceptions.todo_exceptions import TodoTitleEmptyError


def _list(*titles: str) -> TodoList:
    return TodoList(TodoItem(title=title) for title in titles)


def test_add_preserves_insertion_order() -> None:
    todo_list = TodoList()
    for title in ["a", "b", "c", "d"]:
        todo_list.add(TodoItem(title=title))

    assert len(todo_list) == 4
    assert [item.title for item in todo_list] == ["a", "b", "c", "d"]
    assert all(not item.completed for item in todo_list)


def test_item_rejects_blank_title() -> None:
    with pytest.raises(TodoTitleEmptyError):
        TodoItem(title="  ")


def test_find_index_returns_first_exact_match() -> None:
    todo_list = _list("Buy milk", "buy milk", "Buy milk")

    assert todo_list.find_index_by_title("Buy milk") == 0
    assert todo_list.find_index_by_title("buy milk") == 1
    assert todo_list.find_index_by_title("Buy milk ") is None
    assert todo_list.find_index_by_title("Walk dog") is None


def test_complete_only_touches_first_match() -> None:
    todo_list = _list("a", "b", "a")

    assert todo_list.complete("a") is True

    assert todo_list.items() == [
        TodoItem("a", True),
        TodoItem("b", False),
        TodoItem("a", False),
    ]


def test_complete_missing_title_leaves_list_unchanged() -> None:
    todo_list = _list("a", "b")
    before = todo_list.copy()

    assert todo_list.complete("c") is False
    assert todo_list == before


def test_rename_changes_only_title() -> None:
    todo_list = TodoList([TodoItem("a", True), TodoItem("b")])

    assert todo_list.rename("a", "z") is True
    assert todo_list.items() == [TodoItem("z", True), TodoItem("b", False)]
    assert todo_list.rename("missing", "y") is False


def test_remove_keeps_relative_order() -> None:
    todo_list = _list("a", "b", "c", "d")

    assert todo_list.remove("b") is True
    assert [item.title for item in todo_list] == ["a", "c", "d"]

    assert todo_list.remove("b") is False
    assert len(todo_list) == 3


def test_items_returns_a_copy() -> None:
    todo_list = _list("a")
    todo_list.items().clear()

    assert len(todo_list) == 1
