"""Structured logging framework using structlog.

This module provides centralized logging configuration with:
- ISO-8601 timestamps
- JSON rendering for structured logs
- Truncation of long text values so that normalized payloads do not flood logs
- Context binding support
- Dual output (stdout + optional file logging)

Configuration is loaded from text_commonizer.config.settings:
- LOG_LEVEL: Set log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Default: INFO
- TXC_LOG_TO_FILE: Enable file logging. Default: disabled
- TXC_LOG_FILE_DIR: Directory for log files. Default: logs/
- TXC_LOG_TEXT_PREVIEW_CHARS: Longest string rendered per value. Default: 80

Usage:
    >>> from text_commonizer.utils.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("profile_applied", profile="optimize", rules=6)
"""

import logging
import os
from datetime import datetime
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, Dict, MutableMapping

import structlog
from structlog.types import EventDict, Processor

from text_commonizer.config import get_settings

TRUNCATION_MARKER = "..."

# Keys produced by structlog itself; never shortened
_STRUCTLOG_KEYS = {"event", "logger", "level", "timestamp", "exception", "stack"}


def _preview_limit() -> int:
    try:
        return get_settings().log_text_preview_chars
    except Exception:
        # Fallback to environment variable if settings can't be loaded
        return int(os.getenv("TXC_LOG_TEXT_PREVIEW_CHARS", "80") or 0)


def truncate_for_logging(data: Dict[str, Any], limit: int) -> Dict[str, Any]:
    """Shorten long string values of a dictionary before logging.

    Args:
        data: Dictionary that may contain long text values
        limit: Maximum number of characters kept per value (0 = unlimited)

    Returns:
        New dictionary with long strings cut to ``limit`` characters plus marker

    Example:
        >>> truncate_for_logging({"text": "abcdef", "rule": "trim"}, 4)
        {"text": "abcd...", "rule": "trim"}
    """
    truncated: Dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, str) and 0 < limit < len(value):
            truncated[key] = value[:limit] + TRUNCATION_MARKER
        elif isinstance(value, dict):
            truncated[key] = truncate_for_logging(value, limit)
        else:
            truncated[key] = value
    return truncated


def text_preview_processor(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> MutableMapping[str, Any]:
    """Structlog processor that truncates long text fields in event_dict."""
    limit = _preview_limit()
    if limit <= 0:
        return event_dict

    preserved = {k: v for k, v in event_dict.items() if k in _STRUCTLOG_KEYS}
    payload = {k: v for k, v in event_dict.items() if k not in _STRUCTLOG_KEYS}
    return {**truncate_for_logging(payload, limit), **preserved}


def _get_log_level() -> int:
    """Get log level from settings, falling back to the raw environment."""
    try:
        level_name = get_settings().LOG_LEVEL.upper()
    except Exception:
        level_name = os.getenv("LOG_LEVEL", "INFO").upper()

    return getattr(logging, level_name, logging.INFO)


def _should_log_to_file() -> bool:
    try:
        return get_settings().log_to_file
    except Exception:
        return os.getenv("TXC_LOG_TO_FILE", "").lower() in ("1", "true", "yes")


def _get_log_file_path() -> Path:
    """Get the log file path with date-based naming."""
    try:
        log_dir = Path(get_settings().log_file_dir)
    except Exception:
        log_dir = Path(os.getenv("TXC_LOG_FILE_DIR", "logs"))
    log_dir.mkdir(parents=True, exist_ok=True)

    # Format: text-commonizer-YYYYMMDD.log
    date_str = datetime.now().strftime("%Y%m%d")
    return log_dir / f"text-commonizer-{date_str}.log"


def _configure_structlog() -> None:
    """Configure structlog with JSON rendering and text truncation.

    Sets up:
    - ISO-8601 timestamps
    - Logger name
    - Log level
    - Text preview processor
    - JSON renderer
    - Dual output (stdout + optional file)
    """
    level = _get_log_level()
    logging.basicConfig(format="%(message)s", level=level, handlers=[])

    # Host applications that already configured the root logger keep theirs
    if not logging.root.handlers:
        stdout_handler = logging.StreamHandler()
        stdout_handler.setLevel(level)
        logging.root.addHandler(stdout_handler)

    if _should_log_to_file():
        file_handler = TimedRotatingFileHandler(
            filename=str(_get_log_file_path()),
            when="midnight",
            interval=1,
            backupCount=30,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        logging.root.addHandler(file_handler)

    processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        text_preview_processor,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(ensure_ascii=False),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


# Configure structlog on module import
_configure_structlog()


def get_logger(name: str) -> Any:
    """Get a structlog BoundLogger instance.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Returns:
        A structlog BoundLogger configured with JSON rendering
    """
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> Any:
    """Create a logger with bound context fields.

    Example:
        >>> logger = bind_context(profile="optimize", field="title")
        >>> logger.info("field_cleansed", changed=True)
    """
    return structlog.get_logger().bind(**kwargs)
