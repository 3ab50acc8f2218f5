import logging
import sys
from logging.handlers import RotatingFileHandler

from todolist.settings import Settings

_LOG_FILE_NAME = "todolist.log"
_MAX_LOG_BYTES = 5 * 1024 * 1024
_BACKUP_COUNT = 5


def setup_logging(settings: Settings) -> None:
    log_level = logging.DEBUG if settings.debug else logging.INFO
    root_logger = logging.getLogger()
    if getattr(root_logger, "_todolist_logging_configured", False):
        root_logger.setLevel(log_level)
        for handler in root_logger.handlers:
            handler.setLevel(log_level)
        return

    formatter = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")

    # stdout belongs to the menu.
    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setLevel(log_level)
    stream_handler.setFormatter(formatter)

    root_logger.handlers.clear()
    root_logger.setLevel(log_level)
    root_logger.addHandler(stream_handler)

    if settings.log_dir is not None:
        settings.log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            settings.log_dir / _LOG_FILE_NAME,
            maxBytes=_MAX_LOG_BYTES,
            backupCount=_BACKUP_COUNT,
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    root_logger._todolist_logging_configured = True
