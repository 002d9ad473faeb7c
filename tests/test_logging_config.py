"""Tests for log handler construction."""

import logging
import logging.handlers

from src.logging_config import LOG_BACKUP_COUNT, LOG_MAX_BYTES, _build_handlers


def test_handlers_levels_and_rotation(tmp_path):
    file_handler, console_handler = _build_handlers(tmp_path / "test.log", logging.WARNING)
    try:
        assert isinstance(file_handler, logging.handlers.RotatingFileHandler)
        assert file_handler.level == logging.DEBUG
        assert file_handler.maxBytes == LOG_MAX_BYTES
        assert file_handler.backupCount == LOG_BACKUP_COUNT
        assert console_handler.level == logging.WARNING
    finally:
        file_handler.close()


def test_file_handler_writes_formatted_records(tmp_path):
    log_file = tmp_path / "test.log"
    file_handler, _ = _build_handlers(log_file, logging.INFO)
    logger = logging.getLogger("coach_mode.test")
    logger.addHandler(file_handler)
    logger.setLevel(logging.DEBUG)
    try:
        logger.debug("Signed %s", "L. Tunsil")
    finally:
        logger.removeHandler(file_handler)
        file_handler.close()

    text = log_file.read_text(encoding="utf-8")
    assert "coach_mode.test - DEBUG - Signed L. Tunsil" in text
