"""Structured logging setup shared by every agent_template module."""

from __future__ import annotations

import logging
import os
import sys
from typing import Any, Optional

import structlog

_LOG_LEVEL_ENV = "AGENT_LOG_LEVEL"
_LOG_JSON_ENV = "AGENT_LOG_JSON"


def _json_logs_requested(explicit: Optional[bool] = None) -> bool:
    if explicit is not None:
        return bool(explicit)
    value = os.getenv(_LOG_JSON_ENV, "").strip().lower()
    return value in {"1", "true", "yes", "on"}


def _resolve_level(level: Optional[str | int] = None) -> int:
    if isinstance(level, int):
        return level
    name = (level or os.getenv(_LOG_LEVEL_ENV, "") or "INFO").strip().upper()
    resolved = logging.getLevelName(name)
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level '{name}'")
    return resolved


def configure_logging(
    level: Optional[str | int] = None,
    *,
    json_logs: Optional[bool] = None,
) -> None:
    """Configure structlog and the stdlib root logger.

    ``level`` falls back to ``AGENT_LOG_LEVEL`` (default ``INFO``) and
    ``json_logs`` to ``AGENT_LOG_JSON``. Meant for entry points; library
    modules only call :func:`get_logger`.
    """

    log_level = _resolve_level(level)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
        force=True,
    )

    renderer: Any
    if _json_logs_requested(json_logs):
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str, **initial_values: Any) -> structlog.stdlib.BoundLogger:
    """Return a lazy structlog logger; global configuration is left untouched.

    Keyword arguments (typically ``component=...``) are bound to every event
    emitted by the returned logger.
    """

    return structlog.get_logger(name, **initial_values)


__all__ = ["configure_logging", "get_logger"]
