"""
Logging configuration for the keyboard settings app.

All package loggers live under the ``kbsettings`` namespace. Console output is
colored by level; file output is always plain. While the full-screen TUI owns
the terminal only a log file may receive records.
"""

import logging
import sys
from typing import Optional

NAMESPACE = "kbsettings"

RESET = "\033[0m"

# ANSI escapes per level; levels missing here are printed uncolored.
LEVEL_COLORS: dict[int, str] = {
    logging.DEBUG: "\033[2;36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[1;37;41m",
}

CONSOLE_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d - %(message)s"


class ColoredFormatter(logging.Formatter):
    """Formatter that wraps the level name in its ANSI color."""

    def __init__(self, fmt: Optional[str] = None, datefmt: Optional[str] = None, use_colors: bool = True):
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        color = LEVEL_COLORS.get(record.levelno) if self.use_colors else None
        if color:
            # Other handlers share the record; color a copy.
            record = logging.makeLogRecord(record.__dict__)
            record.levelname = f"{color}{record.levelname}{RESET}"
        return super().format(record)


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    if level <= logging.DEBUG:
        handler.setFormatter(ColoredFormatter(DEBUG_CONSOLE_FORMAT, datefmt="%H:%M:%S"))
    else:
        handler.setFormatter(ColoredFormatter(CONSOLE_FORMAT))
    return handler


def _file_handler(path: str, level: int) -> logging.Handler:
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(ColoredFormatter(FILE_FORMAT, use_colors=False))
    return handler


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    console: bool = True,
) -> None:
    """
    Configure the ``kbsettings`` logger tree.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL); unknown
            names fall back to INFO
        log_file: Optional file path for plain log output
        console: Attach a colored stdout handler
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    package_logger = logging.getLogger(NAMESPACE)
    package_logger.setLevel(numeric_level)
    package_logger.handlers.clear()

    if console:
        package_logger.addHandler(_console_handler(numeric_level))
    if log_file:
        package_logger.addHandler(_file_handler(log_file, numeric_level))
    if not package_logger.handlers:
        package_logger.addHandler(logging.NullHandler())

    logging.getLogger("asyncio").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``kbsettings`` namespace."""
    if not name.startswith(NAMESPACE):
        name = f"{NAMESPACE}.{name}"
    return logging.getLogger(name)


def format_exception_summary(
    error: BaseException,
    *,
    max_length: int = 180,
) -> str:
    """
    One-line ``Type: message`` summary for toasts and CLI errors.

    Summaries longer than ``max_length`` end in ``...``.
    """
    name = type(error).__name__
    detail = str(error).strip()
    summary = f"{name}: {detail}" if detail else name
    if max_length <= 3 or len(summary) <= max_length:
        return summary
    return summary[: max_length - 3].rstrip() + "..."


def configure_logging_from_args(
    verbose: bool = False,
    log_level: Optional[str] = None,
    log_file: Optional[str] = None,
    console: bool = True,
) -> None:
    """
    Configure logging from CLI flags.

    ``log_level`` wins over ``verbose``; without either the level is INFO.
    """
    if log_level:
        level = log_level
    elif verbose:
        level = "DEBUG"
    else:
        level = "INFO"
    setup_logging(level=level, log_file=log_file, console=console)
