import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from config import settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILE_NAME = "songs.log"
LOG_MAX_BYTES = 10 * 1024 * 1024
LOG_BACKUP_COUNT = 5


def get_log_dir() -> str:
    # server.py exports SONGS_LOG_DIR before the app is imported
    return os.environ.get("SONGS_LOG_DIR") or settings.LOG_DIR


def get_log_level() -> int:
    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    return level if isinstance(level, int) else logging.INFO


def _file_handler(formatter: logging.Formatter) -> Optional[logging.Handler]:
    log_dir = get_log_dir()
    try:
        os.makedirs(log_dir, exist_ok=True)
        handler = RotatingFileHandler(
            os.path.join(log_dir, LOG_FILE_NAME),
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding='utf-8'
        )
    except OSError as e:
        print(f"File logging disabled for {log_dir}: {e}", file=sys.stderr)
        return None
    handler.setFormatter(formatter)
    return handler


def get_logger(name: str) -> logging.Logger:
    """
    Catalog logger: rotating songs.log plus stderr.

    Handlers are attached once per name, so repeated calls are cheap.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(get_log_level())
    # Lines are emitted here only, not again through root handlers
    logger.propagate = False

    formatter = logging.Formatter(LOG_FORMAT)
    file_handler = _file_handler(formatter)
    if file_handler:
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger
