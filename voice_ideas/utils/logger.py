"""
Logging configuration for the voice ideas package.

Provides structured logging with:
- Console and file handlers
- A separate errors log file
- Optional JSON formatting
- Contextual logging with extra fields
"""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

ROOT_LOGGER_NAME = "voice_ideas"

# Component-specific logger names
LOGGER_NAMES = {
    "main": ROOT_LOGGER_NAME,
    "processor": f"{ROOT_LOGGER_NAME}.processor",
    "semantic": f"{ROOT_LOGGER_NAME}.semantic",
    "loader": f"{ROOT_LOGGER_NAME}.loader",
}

LOG_FILES = {
    "main": "voice_ideas.log",
    "errors": "errors.log",
}

# Attributes every LogRecord carries; anything else came in through `extra`
_RESERVED_RECORD_KEYS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "exc_info",
        "exc_text",
        "thread",
        "threadName",
        "taskName",
        "message",
    }
)


class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_RECORD_KEYS:
                log_data[key] = value

        return json.dumps(log_data, default=str)


class ColoredFormatter(logging.Formatter):
    """Colored console formatter for better readability."""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        """Format with colors for terminal output."""
        color = self.COLORS.get(record.levelname, self.RESET)
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


def setup_logging(
    level: str = "INFO",
    log_dir: Optional[Path] = None,
    json_format: bool = False,
    console_output: bool = True,
) -> None:
    """
    Configure logging for the package.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for log files. If None, file logging is disabled.
        json_format: Use JSON formatting for logs
        console_output: Enable console output
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    standard_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(numeric_level)

        if json_format:
            console_handler.setFormatter(JSONFormatter())
        elif sys.stdout.isatty():
            console_handler.setFormatter(
                ColoredFormatter(standard_format, datefmt=date_format)
            )
        else:
            console_handler.setFormatter(
                logging.Formatter(standard_format, datefmt=date_format)
            )

        root_logger.addHandler(console_handler)

    if log_dir:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        file_formatter = (
            JSONFormatter()
            if json_format
            else logging.Formatter(standard_format, datefmt=date_format)
        )

        main_handler = logging.FileHandler(log_dir / LOG_FILES["main"])
        main_handler.setLevel(numeric_level)
        main_handler.setFormatter(file_formatter)
        root_logger.addHandler(main_handler)

        # ERROR and above only
        error_handler = logging.FileHandler(log_dir / LOG_FILES["errors"])
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(file_formatter)
        root_logger.addHandler(error_handler)

    root_logger.propagate = False


def get_logger(name: str = "main") -> logging.Logger:
    """
    Get a logger instance for the specified component.

    Args:
        name: Component name (main, processor, semantic, loader), a module
              name already inside the package, or a custom name that will
              be prefixed with 'voice_ideas.'

    Returns:
        Logger instance for the component.
    """
    if name in LOGGER_NAMES:
        return logging.getLogger(LOGGER_NAMES[name])
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


class LoggerAdapter(logging.LoggerAdapter):
    """
    Logger adapter that adds contextual information to log records.

    Useful for adding source paths, entry IDs, or other context.
    """

    def process(
        self, msg: str, kwargs: dict[str, Any]
    ) -> tuple[str, dict[str, Any]]:
        """Add extra context to the log message."""
        extra = kwargs.get("extra", {})
        extra.update(self.extra)
        kwargs["extra"] = extra

        if self.extra:
            context_str = " ".join(f"[{k}={v}]" for k, v in self.extra.items())
            msg = f"{context_str} {msg}"

        return msg, kwargs


def get_contextual_logger(
    name: str = "main", **context: Any
) -> LoggerAdapter:
    """
    Get a logger with contextual information attached.

    Args:
        name: Component name
        **context: Key-value pairs to include in all log messages

    Returns:
        LoggerAdapter with context attached.

    Example:
        logger = get_contextual_logger("loader", path="entries.csv")
        logger.info("Loading entries")  # Includes path in output
    """
    return LoggerAdapter(get_logger(name), context)


def setup_logging_from_settings() -> None:
    """Configure logging from application settings."""
    from voice_ideas.utils.config import get_settings

    settings = get_settings()
    setup_logging(
        level=settings.logging.level.value,
        log_dir=settings.logging.dir,
        json_format=settings.logging.json_format,
        console_output=True,
    )
