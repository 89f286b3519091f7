"""Structured logging configuration using structlog."""

import logging
import sys
from pathlib import Path
from typing import Any

import structlog
from structlog.types import EventDict, Processor

from .. import __version__


def add_app_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Add application context to log entries.

    Args:
        logger: Logger instance
        method_name: Method name
        event_dict: Event dictionary

    Returns:
        Modified event dictionary with app context
    """
    event_dict["app"] = "careerpath"
    event_dict["version"] = __version__
    return event_dict


def resolve_level(log_level: str | int) -> int:
    """Map a level name ("info") or number (20, "20") to a logging level.

    Config values arrive as either, since env overrides convert digits to int.
    Unknown names fall back to WARNING.
    """
    if isinstance(log_level, int):
        return log_level
    text = str(log_level).strip()
    if text.isdigit():
        return int(text)
    level = getattr(logging, text.upper(), None)
    return level if isinstance(level, int) else logging.WARNING


def _replace_file_handler(root_logger: logging.Logger, log_path: Path, level: int) -> None:
    for handler in list(root_logger.handlers):
        if isinstance(handler, logging.FileHandler):
            root_logger.removeHandler(handler)
            handler.close()

    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(file_handler)


def setup_logging(
    log_level: str | int = "WARNING",
    log_format: str = "json",
    log_file: str | Path | None = None,
) -> None:
    """Setup structured logging with structlog.

    Safe to call repeatedly: a later call replaces the file handler of an
    earlier one instead of adding a second.

    Args:
        log_level: Level name (DEBUG, INFO, ...) or numeric level
        log_format: Output format ("json" or "console")
        log_file: Optional log file path
    """
    numeric_level = resolve_level(log_level)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        add_app_context,
    ]

    if log_format == "console":
        processors = shared_processors + [
            structlog.processors.ExceptionPrettyPrinter(),
            structlog.dev.ConsoleRenderer(colors=True),
        ]
    else:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    # Log records go to stderr so command output on stdout stays clean
    root_logger = logging.getLogger()
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=numeric_level)
    root_logger.setLevel(numeric_level)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        _replace_file_handler(root_logger, log_path, numeric_level)


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (defaults to caller's module name)

    Returns:
        Structured logger

    Example:
        logger = get_logger(__name__)
        logger.info("stage_changed", from_stage=1, to_stage=2)
    """
    return structlog.get_logger(name)


# Initialize logging on module import with defaults
# Can be reconfigured later with setup_logging()
setup_logging()
