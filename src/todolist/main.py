"""Run the interactive to-do list."""

from __future__ import annotations

import logging
import sys

import colorama

from todolist.composition_root import create_app_container
from todolist.env import load_env
from todolist.logging_setup import setup_logging
from todolist.settings import load_settings

logger = logging.getLogger(__name__)

def main() -> int:
    load_env()
    settings = load_settings()
    setup_logging(settings)
    if settings.use_color:
        colorama.just_fix_windows_console()

    container = create_app_container(settings)
    todo_list = container.store.load()
    logger.debug("Session started with %d todos from %s", len(todo_list), settings.todo_file)
    return container.menu.run()


if __name__ == "__main__":
    sys.exit(main())
