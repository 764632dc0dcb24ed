"""
Structured logging configuration using structlog.

Every event carries the library name and environment. Contract values
passed as event fields (matchers, cells, rules) are rendered through their
``to_dict()`` so that JSON output stays readable.
"""

import logging
import sys
from typing import Any

import structlog

from dualcontract.shared.infrastructure.config import settings


def add_library_context(logger: Any, method_name: str, event_dict: dict) -> dict:
    """Stamp each event with the configured library name and environment."""
    event_dict.setdefault("app", settings.app_name)
    event_dict.setdefault("env", settings.app_env)
    return event_dict


def render_contract_values(logger: Any, method_name: str, event_dict: dict) -> dict:
    """Replace contract model objects in event fields by their serialized form."""
    for key, field_value in event_dict.items():
        to_dict = getattr(field_value, "to_dict", None)
        if callable(to_dict) and not isinstance(field_value, type):
            event_dict[key] = to_dict()
    return event_dict


def _log_level() -> int:
    if settings.debug:
        return logging.DEBUG
    return getattr(logging, settings.log_level.upper())


def configure_logging(stream: Any = sys.stderr) -> None:
    """
    Configure structlog for the library.

    Console rendering in development, JSON in production. ``debug=True``
    forces the DEBUG level; otherwise the level comes from ``log_level``.
    """
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_library_context,
        render_contract_values,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if settings.is_development:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    else:
        processors.extend([structlog.processors.format_exc_info, structlog.processors.JSONRenderer()])

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", stream=stream, level=_log_level(), force=True)


def get_logger(name: str) -> Any:
    """
    Get a structured logger instance.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.debug("contract_resolved", contract="shouldReturnUser", mode="consumer")
    """
    return structlog.get_logger(name)
