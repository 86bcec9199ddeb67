"""Structured logging configuration with structlog.

Level and output format default to the RIICHI_HAND_LOG_LEVEL and
RIICHI_HAND_LOG_FORMAT settings ("console" for human-readable output, "json"
for log aggregation).
"""

from __future__ import annotations

import logging
import sys
from enum import Enum
from typing import TYPE_CHECKING

import structlog

from riichi_hand.config import settings

if TYPE_CHECKING:
    from collections.abc import MutableMapping
    from typing import Any

_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

logging.getLogger("riichi_hand").addHandler(logging.NullHandler())


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """structlog logger bound to the stdlib logger ``name``.

    Events are emitted through stdlib logging, so nothing is written until
    the application installs handlers (for example with ``setup_logging``).
    """
    return structlog.wrap_logger(logging.getLogger(name))


def _serialize_enums(
    _logger: object,
    _method_name: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Replace Enum instances with their .value for readable log output."""
    for key, value in event_dict.items():
        if isinstance(value, Enum):
            event_dict[key] = value.value
    return event_dict


def _resolve_log_level(value: int | str) -> int:
    if isinstance(value, int):
        return value
    name = value.upper()
    if name not in _VALID_LOG_LEVELS:
        msg = f"Invalid log level {value!r}. Must be one of {', '.join(sorted(_VALID_LOG_LEVELS))}."
        raise ValueError(msg)
    return getattr(logging, name)


def _build_formatter(*, json_mode: bool, colors: bool = False) -> logging.Formatter:
    renderer = structlog.processors.JSONRenderer() if json_mode else structlog.dev.ConsoleRenderer(colors=colors)
    return structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            renderer,
        ],
    )


def setup_logging(level: int | str | None = None, json_mode: bool | None = None) -> None:
    """Configure structlog and the stdlib root logger to write to stdout."""
    resolved_level = _resolve_log_level(settings.log_level if level is None else level)
    if json_mode is None:
        json_mode = settings.log_format == "json"

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            _serialize_enums,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved_level)
    # clear existing handlers to avoid duplicates on repeated calls
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_build_formatter(json_mode=json_mode, colors=sys.stdout.isatty()))
    root_logger.addHandler(handler)
