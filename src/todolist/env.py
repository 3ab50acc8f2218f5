from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

_LOADED = False


def load_env(cwd: Path | None = None) -> Path | None:
    """Load the first ``.env`` found in the working directory or the project root."""
    global _LOADED
    if _LOADED:
        return None
    _LOADED = True

    base_dir = Path(__file__).resolve().parent
    candidates = [
        (cwd or Path.cwd()) / ".env",
        base_dir.parents[1] / ".env",
    ]

    for path in candidates:
        if not path.exists():
            continue
        # Real environment variables win over the file.
        load_dotenv(dotenv_path=path, override=False)
        if os.getenv("TODO_DEBUG") == "1":
            print(f"DEBUG: Environment loaded from {path}")
        return path
    return None
