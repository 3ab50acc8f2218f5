"""Interactive command-line to-do list backed by a JSON file."""

__version__ = "0.1.0"
