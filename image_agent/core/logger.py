"""Structured logging setup using structlog."""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from image_agent.core.config import get_settings


_CONFIGURED = False


def _add_app_context(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    del logger, method_name
    settings = get_settings()
    event_dict.setdefault("app", settings.app_name)
    event_dict.setdefault("app_version", settings.app_version)
    return event_dict


def configure_logging() -> None:
    """Initialize structlog once for JSON-formatted logs on stderr.

    stdout belongs to the agent transport, so nothing here may write to it.
    """

    global _CONFIGURED
    if _CONFIGURED:
        return

    settings = get_settings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(level=level, format="%(message)s", stream=sys.stderr)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            _add_app_context,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )

    _CONFIGURED = True


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    configure_logging()
    return structlog.get_logger(name)


def truncate_prompt(prompt: str, limit: int = 100) -> str:
    if len(prompt) <= limit:
        return prompt
    return prompt[:limit] + "..."
