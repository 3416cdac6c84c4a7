"""Logging setup for quickrun.

Modules use the standard pattern:

    import logging
    logger = logging.getLogger(__name__)

The CLI calls setup_logging() once. Output goes to a rotating file so that
log lines never land on top of the overlay.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from quickrun.config.constants import LOG_FILE_NAME, QUICKRUN_CONFIG_DIR

# Max log file size: 5MB, keep 2 backups
_MAX_LOG_BYTES = 5 * 1024 * 1024
_BACKUP_COUNT = 2

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", log_dir: Optional[Path] = None) -> logging.Logger:
    """
    Configure the quickrun logger hierarchy.

    Args:
        level: Level name for quickrun.* loggers
        log_dir: Directory for the log file (defaults to ~/.config/quickrun)

    Returns:
        The package logger
    """
    logger = logging.getLogger("quickrun")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
        directory = log_dir or QUICKRUN_CONFIG_DIR
        try:
            directory.mkdir(parents=True, exist_ok=True)
            handler = RotatingFileHandler(
                directory / LOG_FILE_NAME, maxBytes=_MAX_LOG_BYTES, backupCount=_BACKUP_COUNT
            )
        except OSError:
            # Read-only home: keep running without a log file
            handler = logging.NullHandler()
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
        logger.addHandler(handler)

    # Textual and other libraries stay quiet unless something is wrong
    logging.getLogger().setLevel(logging.WARNING)
    logger.propagate = False

    return logger
