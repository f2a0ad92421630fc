"""
Logging setup for the ``coordkit`` logger hierarchy.

Library modules log through ``logging.getLogger(__name__)`` and stay
silent until the host configures logging. :func:`setup_logging` is for
hosts that want coordkit diagnostics routed separately: it attaches
handlers to the ``coordkit`` logger only and never touches the root
logger or other libraries' loggers.
"""

import json
import logging
import logging.handlers
from pathlib import Path
from typing import Any, Dict, List, Optional

from coordkit.core.config import settings

PACKAGE_LOGGER = "coordkit"

# Set on handlers created by setup_logging so a later call replaces only those
_HANDLER_MARK = "_coordkit_handler"

_CONSOLE_FORMAT = "%(levelname)s | %(asctime)s | %(name)s:%(lineno)d | %(message)s"
_PLAIN_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(funcName)s:%(lineno)d - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# Attributes every LogRecord has; anything else arrived through ``extra=``
_STANDARD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """
    One JSON object per record, including fields passed via ``extra=``.
    """

    def format(self, record: logging.LogRecord) -> str:
        """
        Serialize a record.

        Args:
            record: Log record to format

        Returns:
            JSON string
        """
        payload: Dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "function": record.funcName,
            "line": record.lineno,
        }
        payload.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _STANDARD_ATTRS
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


class ColoredFormatter(logging.Formatter):
    """Console formatter that colors the level name."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        original = record.levelname
        color = self.COLORS.get(original)
        if color:
            record.levelname = f"{color}{original}{self.RESET}"
        try:
            return super().format(record)
        finally:
            # The same record may reach other handlers
            record.levelname = original


def get_log_level(level_name: str) -> int:
    """
    Map a level name to its logging constant, INFO for unknown names.
    """
    return _LEVELS.get(level_name.upper(), logging.INFO)


def _default_level_name() -> str:
    if settings.log_level:
        return settings.log_level
    return "DEBUG" if settings.environment == "development" else "INFO"


def _console_handler() -> logging.Handler:
    handler = logging.StreamHandler()
    if settings.environment == "development":
        handler.setFormatter(ColoredFormatter(_CONSOLE_FORMAT, datefmt=_DATE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT, datefmt=_DATE_FORMAT))
    return handler


def _file_handler(log_file: Path, json_logs: bool) -> logging.Handler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    # 10MB per file, keep 5 backups
    handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    if json_logs:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(_PLAIN_FORMAT, datefmt=_DATE_FORMAT))
    return handler


def setup_logging(
    log_level: Optional[str] = None,
    log_file: Optional[Path] = None,
    json_logs: bool = False,
    enable_console: bool = True,
) -> logging.Logger:
    """
    Route coordkit diagnostics to the console and/or a rotating file.

    Calling it again replaces the handlers from the previous call. While
    coordkit has its own handlers its records do not propagate, so the
    host's root handlers do not print them a second time.

    Args:
        log_level: Level name; defaults to ``settings.log_level``, else
            DEBUG in development and INFO elsewhere
        log_file: Optional path of a rotating log file
        json_logs: Use :class:`JSONFormatter` for the file
        enable_console: Attach a stderr handler

    Returns:
        The configured ``coordkit`` logger
    """
    level_name = log_level or _default_level_name()
    level = get_log_level(level_name)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for handler in [h for h in logger.handlers if getattr(h, _HANDLER_MARK, False)]:
        logger.removeHandler(handler)
        handler.close()

    handlers: List[logging.Handler] = []
    if enable_console:
        handlers.append(_console_handler())
    if log_file:
        handlers.append(_file_handler(log_file, json_logs))

    for handler in handlers:
        handler.setLevel(level)
        setattr(handler, _HANDLER_MARK, True)
        logger.addHandler(handler)
    logger.propagate = not handlers

    logger.debug(
        "Logging configured",
        extra={"log_level": level_name, "json_logs": json_logs, "log_file": log_file},
    )
    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger for a coordkit module (typically ``__name__``)."""
    return logging.getLogger(name)
