import logging
import logging.handlers
from pathlib import Path
from typing import Optional

LOG_FILE_NAME = "coach_mode.log"
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 3
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _build_handlers(log_file: Path, console_level: int):
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    # Everything goes to the rotating file; the console follows log_level
    file_handler = logging.handlers.RotatingFileHandler(
        log_file, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level)
    console_handler.setFormatter(formatter)

    return file_handler, console_handler


def setup_logging(log_level: str = "INFO", log_dir: Optional[Path] = None) -> None:
    """Configure logging for the coach mode engines.

    Args:
        log_level: Console and root level name, e.g. ``"DEBUG"``.
        log_dir: Where ``coach_mode.log`` is written. Defaults to ``logs/``
            at the project root.
    """
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return  # Already configured

    log_dir = log_dir or Path(__file__).parent.parent / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)

    level = getattr(logging, log_level.upper(), logging.INFO)
    root_logger.setLevel(level)
    for handler in _build_handlers(log_dir / LOG_FILE_NAME, level):
        root_logger.addHandler(handler)

    logging.getLogger(__name__).info(
        "Logging initialized (level=%s, file=%s)", log_level, log_dir / LOG_FILE_NAME
    )
