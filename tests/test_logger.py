import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from inventory_report import config
from inventory_report.logger import get_logger


def test_same_logger_returned_per_name():
    assert get_logger("inventory_report.tests.a") is get_logger("inventory_report.tests.a")


def test_loggers_share_handlers():
    first = get_logger("inventory_report.tests.first")
    second = get_logger("inventory_report.tests.second")

    assert first.handlers == second.handlers
    assert not first.propagate


def test_handler_levels_and_rotation_come_from_config():
    handlers = get_logger("inventory_report.tests.levels").handlers

    console = [h for h in handlers if type(h) is logging.StreamHandler]
    rotating = [h for h in handlers if isinstance(h, RotatingFileHandler)]

    assert len(console) == 1
    assert console[0].level == logging.getLevelName(config.CONSOLE_LOG_LEVEL)
    assert len(rotating) == 1
    assert rotating[0].level == logging.getLevelName(config.FILE_LOG_LEVEL)
    assert rotating[0].maxBytes == config.LOG_MAX_BYTES
    assert rotating[0].backupCount == config.LOG_BACKUP_COUNT


def test_debug_records_written_to_log_file():
    logger = get_logger("inventory_report.tests.file")
    logger.debug("recipient count 3")
    for handler in logger.handlers:
        handler.flush()

    log_text = (Path(config.LOGS_DIR) / config.LOG_FILENAME).read_text(encoding="utf-8")
    assert "DEBUG - inventory_report.tests.file - recipient count 3" in log_text
