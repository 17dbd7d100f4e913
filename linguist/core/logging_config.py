"""Logging configuration for linguist and the embedding tool."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

# Per-library log levels; linguist loggers inherit the root level
LOGGING_CONFIG = {
    # Reduce noise from libraries
    "pydantic": logging.WARNING,
}


class ColoredFormatter(logging.Formatter):
    """Colored log formatter for console output."""

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',    # Red
        'CRITICAL': '\033[35m', # Magenta
    }
    RESET = '\033[0m'

    def format(self, record: logging.LogRecord) -> str:
        levelname = record.levelname
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{self.RESET}"

        result = super().format(record)

        # Reset levelname for other handlers
        record.levelname = levelname

        return result


def setup_logging(log_file: Optional[Path] = None, debug: bool = False, level: str = "INFO") -> None:
    """Configure root logging for applications embedding linguist."""
    root_level = logging.DEBUG if debug else logging.getLevelName(level)
    if not isinstance(root_level, int):
        root_level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(root_level)
    root_logger.handlers.clear()

    # Console handler with color
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(root_level)
    console_format = "%(asctime)s %(levelname)-8s %(name)s - %(message)s"
    console_handler.setFormatter(ColoredFormatter(console_format, datefmt="%H:%M:%S"))
    root_logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=1024*1024,  # 1MB
            backupCount=3,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)

        # Detailed format for file
        file_format = "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d) - %(message)s"
        file_handler.setFormatter(logging.Formatter(file_format, datefmt="%Y-%m-%d %H:%M:%S"))
        root_logger.addHandler(file_handler)

    for logger_name, logger_level in LOGGING_CONFIG.items():
        logging.getLogger(logger_name).setLevel(logger_level)

    logging.getLogger(__name__).debug(
        "Logging configured (console=%s, file=%s)",
        logging.getLevelName(root_level),
        log_file or "DISABLED",
    )
