"""Structured logging setup for Social Manager."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Any

import structlog
from structlog.types import Processor

from .config import get_settings


class _TeeLoggerFactory:
    """Logger factory that writes to both stdout and a log file."""

    def __init__(self, file_path: Path) -> None:
        self._file = open(file_path, "a", buffering=1)  # line-buffered

    def __call__(self, *args: Any, **kwargs: Any) -> "_TeeLogger":
        return _TeeLogger(self._file)


class _TeeLogger:
    """Logger that writes each message to stdout and a file."""

    def __init__(self, file: Any) -> None:
        self._file = file

    def msg(self, message: str) -> None:
        print(message, flush=True)
        self._file.write(message + "\n")

    log = debug = info = warn = warning = msg
    fatal = failure = err = error = critical = msg


def setup_logging(
    level: str | None = None,
    format_type: str | None = None,
    log_file: str | None = None,
) -> None:
    """
    Set up structured logging for the plugin.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: Output format ('json' or 'text')
        log_file: Optional file receiving a copy of every line
    """
    settings = get_settings()
    log_level = (level or settings.logging.level).upper()
    log_format = format_type or settings.logging.format
    file_name = log_file if log_file is not None else settings.logging.file

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    logger_factory: Any = structlog.PrintLoggerFactory(sys.stdout)

    if file_name:
        path = Path(file_name).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logging.handlers.RotatingFileHandler(
                path,
                maxBytes=settings.logging.max_size_mb * 1024 * 1024,
                backupCount=settings.logging.backup_count,
            )
        )
        logger_factory = _TeeLoggerFactory(path)

    # Standard library logging for anything not going through structlog
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, log_level),
        handlers=handlers,
        force=True,
    )

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_format == "json":
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=False),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, log_level)),
        context_class=dict,
        logger_factory=logger_factory,
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a logger instance.

    Args:
        name: Logger name (usually __name__ of the calling module)

    Returns:
        Configured structured logger
    """
    return structlog.get_logger(name)
