"""Interactive numbered menu driving a ``TodoController``."""

from __future__ import annotations

from collections.abc import Callable

from todolist.application.todo.errors import TodoNotFoundError, TodoTitleEmptyError
from todolist.presentation.controllers.todo_controller import TodoController
from todolist.presentation.ui.viewmodels.todo_viewmodel import todos_to_lines

MENU_TITLE = "\n\U0001f4dd\U0001f4dd\U0001f4dd ToDo App \U0001f4dd\U0001f4dd\U0001f4dd"
MENU_OPTIONS = (
    ("1", "Create new ToDo"),
    ("2", "Finish A ToDo"),
    ("3", "Edit A ToDo"),
    ("4", "Delete A ToDo"),
    ("5", "Save"),
    ("6", "Show My ToDo List"),
    ("7", "Exit"),
)
EXIT_CHOICE = "7"


class TodoMenu:
    def __init__(
        self,
        controller: TodoController,
        read_line: Callable[[str], str] | None = None,
        write_line: Callable[[str], None] | None = None,
        use_color: bool = True,
    ) -> None:
        self.controller = controller
        self._read_line = read_line or input
        self._write_line = write_line or print
        self.use_color = use_color
        self._actions: dict[str, Callable[[], None]] = {
            "1": self.create_todo,
            "2": self.finish_todo,
            "3": self.edit_todo,
            "4": self.delete_todo,
            "5": self.save_todos,
            "6": self.show_todos,
        }

    def _prompt(self, text: str) -> str:
        return self._read_line(text).strip()

    def show_menu(self) -> None:
        self._write_line(MENU_TITLE)
        for key, label in MENU_OPTIONS:
            self._write_line(f"{key}. {label}")

    def run(self) -> int:
        """Loop until the exit choice or end of input; returns the exit code."""
        while True:
            self.show_menu()
            try:
                choice = self._prompt("Enter your choice: ")
                if choice == EXIT_CHOICE:
                    break
                action = self._actions.get(choice)
                if action is None:
                    self._write_line("Invalid choice.")
                    continue
                action()
            except (EOFError, KeyboardInterrupt):
                self._write_line("")
                break
        if self.controller.has_unsaved_changes():
            self._write_line("\u26a0\ufe0f Unsaved changes were not written to disk.")
        self._write_line("\U0001f44b Bye Bye \U0001f44b")
        return 0

    def create_todo(self) -> None:
        title = self._prompt("Enter a title: ")
        try:
            self.controller.create_todo(title)
        except TodoTitleEmptyError:
            self._write_line("❌ A title is required.")
            return
        self._write_line("✅ New Item added to the list.")

    def finish_todo(self) -> None:
        title = self._prompt("Enter the title you want completed: ")
        try:
            self.controller.complete_todo(title)
        except TodoNotFoundError:
            self._write_line(f"❌ Item {title} Was Not Found.")
            return
        self._write_line(f"✅ Item {title} has been completed")

    def edit_todo(self) -> None:
        title = self._prompt("Enter the title you want to edit: ")
        if not self.controller.has_todo(title):
            self._write_line(f"❌ Item {title} Was Not Found.")
            return
        new_title = self._prompt("Enter the new title: ")
        try:
            self.controller.rename_todo(title, new_title)
        except TodoTitleEmptyError:
            self._write_line("❌ A title is required.")
            return
        self._write_line(f"✅ Item {title} has been edited ==> New Title: {new_title}")

    def delete_todo(self) -> None:
        title = self._prompt("Enter the title you want deleted: ")
        try:
            self.controller.delete_todo(title)
        except TodoNotFoundError:
            self._write_line(f"❌ Item {title} Was Not Found.")
            return
        self._write_line(f"✅ Item {title} has been deleted.")

    def save_todos(self) -> None:
        if self.controller.save_todos():
            self._write_line("To-Do list saved.")
        else:
            self._write_line("❌ Failed to save to-do list.")

    def show_todos(self) -> None:
        lines = todos_to_lines(self.controller.list_todos(), use_color=self.use_color)
        if not lines:
            self._write_line("No to-do items yet.")
            return
        for line in lines:
            self._write_line(line)
