# services/logger_config.py
import logging
from logging.handlers import RotatingFileHandler
import os
from typing import List

from config import settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'

# Third-party loggers whose warnings belong in the service log
CORPUS_LIBRARY_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool")


def _build_handlers(formatter: logging.Formatter) -> List[logging.Handler]:
    handlers: List[logging.Handler] = []

    # File Handler: rotates so long-running servers keep bounded logs
    try:
        log_dir = os.path.dirname(settings.LOG_FILE_PATH)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir, exist_ok=True)

        file_handler = RotatingFileHandler(
            settings.LOG_FILE_PATH,
            maxBytes=5 * 1024 * 1024,  # 5MB
            backupCount=5,
            encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        file_handler.setLevel(settings.LOG_LEVEL)
        handlers.append(file_handler)
    except OSError as e:
        print(f"Error setting up file logger: {e}")

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(settings.CONSOLE_LOG_LEVEL)
    handlers.append(console_handler)
    return handlers


def setup_logging():
    """
    Configure the Mushaf layout logger.

    Page layout events go to a rotating file and the console; SQLAlchemy
    warnings about the corpus databases are routed to the same handlers.
    """
    logger = logging.getLogger(settings.LOGGER_NAME)

    # Avoid adding duplicate handlers if this function is called multiple times
    if logger.hasHandlers():
        logger.handlers.clear()

    logger.setLevel(logging.DEBUG)
    handlers = _build_handlers(logging.Formatter(LOG_FORMAT))
    for handler in handlers:
        logger.addHandler(handler)
    logger.propagate = True

    for name in CORPUS_LIBRARY_LOGGERS:
        library_logger = logging.getLogger(name)
        library_logger.setLevel(logging.WARNING)
        library_logger.handlers.clear()
        for handler in handlers:
            library_logger.addHandler(handler)

    logger.info(f"Logging configured (file: {settings.LOG_FILE_PATH}, level: {settings.LOG_LEVEL})")
