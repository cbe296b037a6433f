"""
Structured logging configuration using structlog.

The renderer follows ``LOG_FORMAT``: ``console`` for humans, ``json`` for log
shippers, ``auto`` to pick console in development and JSON elsewhere.
Request-scoped fields such as the request ID are carried in structlog
contextvars so store and service logs inherit them.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor

from src.config.settings import Settings, get_settings


def add_app_context(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Stamp every event with the service name, version and environment."""
    settings = get_settings()
    event_dict["app"] = settings.app_name
    event_dict["version"] = settings.app_version
    event_dict["environment"] = settings.environment
    return event_dict


def use_json_logs(settings: Settings) -> bool:
    """Whether the configured format renders JSON lines."""
    if settings.log_format == "auto":
        return settings.environment != "development"
    return settings.log_format == "json"


def configure_logging(log_level: str | None = None) -> None:
    """Configure structlog and the stdlib root logger.

    ``log_level`` overrides the configured level, as ``manage.py --verbose`` does.
    """
    settings = get_settings()
    level = log_level or settings.log_level

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        add_app_context,
    ]

    if use_json_logs(settings):
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [structlog.dev.ConsoleRenderer(colors=True)]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level),
        force=True,
    )

    # aiosqlite logs every statement at debug
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def bind_request_context(request_id: str, **fields: Any) -> None:
    """Attach request-scoped fields to every log event until cleared."""
    structlog.contextvars.bind_contextvars(request_id=request_id, **fields)


def clear_request_context() -> None:
    """Drop all request-scoped log fields."""
    structlog.contextvars.clear_contextvars()


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
