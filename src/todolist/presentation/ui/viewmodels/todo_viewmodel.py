from __future__ import annotations

from collections.abc import Iterable, Mapping

from colorama import Fore, Style

_MARKERS = ("\u26ab\ufe0f", "\u26aa\ufe0f")


def _paint(text: str, color: str, use_color: bool) -> str:
    if not use_color:
        return text
    return f"{color}{text}{Style.RESET_ALL}"


def todo_status(todo: Mapping[str, object]) -> str:
    return "completed" if todo["completed"] else "pending"


def todo_to_line(todo: Mapping[str, object], position: int, use_color: bool = True) -> str:
    status = todo_status(todo)
    status_color = Fore.GREEN if todo["completed"] else Fore.RED
    marker = _MARKERS[(position - 1) % 2]
    return (
        f"{marker} {_paint(str(position), Fore.LIGHTYELLOW_EX, use_color)}. "
        f"Title: {_paint(str(todo['title']), Fore.CYAN, use_color)} - "
        f"Status: {_paint(status, status_color, use_color)}"
    )


def todos_to_lines(todos: Iterable[Mapping[str, object]], use_color: bool = True) -> list[str]:
    return [todo_to_line(todo, position, use_color) for position, todo in enumerate(todos, 1)]
