"""Structured logging helpers for the job board."""

import logging
from typing import Optional, Union

from .config import ContextualFilter, JSONFormatter, KeyValueFormatter, configure_logging
from .context import (
    clear_log_context,
    get_log_context,
    log_context,
    new_request_id,
    pop_log_context,
    push_log_context,
)


class ComponentLoggerAdapter(logging.LoggerAdapter):
    """Adapter that adds a ``component`` field without clobbering call extras."""

    def process(self, msg, kwargs):
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return msg, kwargs


def get_logger(
    name: str, component: Optional[str] = None
) -> Union[logging.Logger, ComponentLoggerAdapter]:
    """Return a logger, tagged with a component name when one is given.

    Example:
        >>> logger = get_logger(__name__, component="store")
        >>> logger.info("Fetched records", extra={"event": "store.fetch.completed"})
    """
    logger = logging.getLogger(name)
    if component:
        return ComponentLoggerAdapter(logger, {"component": component})
    return logger


__all__ = [
    "ComponentLoggerAdapter",
    "ContextualFilter",
    "JSONFormatter",
    "KeyValueFormatter",
    "clear_log_context",
    "configure_logging",
    "get_log_context",
    "get_logger",
    "log_context",
    "new_request_id",
    "pop_log_context",
    "push_log_context",
]
