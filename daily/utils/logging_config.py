import logging
import sys
import os
from datetime import datetime
from typing import Optional

from daily.core.config import LOG_DIR, LOG_TO_CONSOLE

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d - %(message)s"


class ColoredFormatter(logging.Formatter):
    """Custom formatter to add colors to console output."""

    cyan = "\x1b[36m"
    green = "\x1b[32m"
    yellow = "\x1b[33m"
    red = "\x1b[31m"
    bold_red = "\x1b[31;1m"
    reset = "\x1b[0m"

    FORMATS = {
        logging.DEBUG: cyan + LOG_FORMAT + reset,
        logging.INFO: green + LOG_FORMAT + reset,
        logging.WARNING: yellow + LOG_FORMAT + reset,
        logging.ERROR: red + LOG_FORMAT + reset,
        logging.CRITICAL: bold_red + LOG_FORMAT + reset
    }

    def format(self, record):
        log_fmt = self.FORMATS.get(record.levelno)
        # Handle cases where level might be outside standard range
        if not log_fmt:
            log_fmt = LOG_FORMAT
        formatter = logging.Formatter(log_fmt, datefmt="%Y-%m-%d %H:%M:%S")
        return formatter.format(record)


def setup_logging(level=logging.INFO, log_dir: Optional[str] = None, console: bool = LOG_TO_CONSOLE):
    """
    Setup centralized logging configuration.

    The file handler is always installed. The stderr handler is opt-in
    because the wizard owns the terminal while it runs.
    """
    root_logger = logging.getLogger()

    # Clear existing handlers to prevent duplicate logs
    if root_logger.handlers:
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)

    root_logger.setLevel(level)

    # 1. File handler, one file per day
    log_dir = str(log_dir or LOG_DIR)
    if not os.path.exists(log_dir):
        os.makedirs(log_dir)

    file_handler = logging.FileHandler(
        os.path.join(log_dir, f"daily_{datetime.now().strftime('%Y%m%d')}.log"),
        encoding="utf-8",
    )
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root_logger.addHandler(file_handler)

    # 2. Console handler (stderr, coloured)
    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(ColoredFormatter())
        root_logger.addHandler(console_handler)

    # Third-party loggers are chatty at DEBUG
    for logger_name in ["httpx", "httpcore", "asyncio"]:
        logging.getLogger(logger_name).setLevel(max(level, logging.WARNING))

    logging.getLogger("daily").setLevel(level)

    root_logger.info("Logging initialized (file: %s, console: %s).", log_dir, console)
