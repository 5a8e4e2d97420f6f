"""
Logging setup for the inventory report package.

Every module gets its logger from get_logger(__name__). Loggers share one
console handler and, when LOG_TO_FILE is on, one rotating file handler, so
records from all modules land in the same file in order.

Levels, rotation and the file toggle come from inventory_report.config.
No email addresses or rep names are logged anywhere in the package.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional

from inventory_report import config

_loggers = {}
_shared_handlers: Optional[List[logging.Handler]] = None


def _build_handlers() -> List[logging.Handler]:
    formatter = logging.Formatter(fmt=config.LOG_FORMAT, datefmt=config.LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(config.CONSOLE_LOG_LEVEL)
    console_handler.setFormatter(formatter)
    handlers: List[logging.Handler] = [console_handler]

    if config.LOG_TO_FILE:
        logs_path = Path(config.LOGS_DIR)
        logs_path.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            logs_path / config.LOG_FILENAME,
            maxBytes=config.LOG_MAX_BYTES,
            backupCount=config.LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(config.FILE_LOG_LEVEL)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    return handlers


def get_logger(name: str) -> logging.Logger:
    """
    Get the package logger for a module.

    Args:
        name: Logger name (typically __name__ from calling module)

    Returns:
        Logger attached to the shared handlers. Propagation to the root logger
        is off so records are not printed twice when the host app configures logging.
    """
    global _shared_handlers

    if name in _loggers:
        return _loggers[name]

    if _shared_handlers is None:
        _shared_handlers = _build_handlers()

    logger = logging.getLogger(name)
    logger.setLevel(min(handler.level for handler in _shared_handlers))
    logger.propagate = False
    for handler in _shared_handlers:
        if handler not in logger.handlers:
            logger.addHandler(handler)

    _loggers[name] = logger
    return logger
