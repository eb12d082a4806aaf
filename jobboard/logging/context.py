"""Scoped logging context.

Fields pushed here (request_id, job_id, feed_format, ...) are copied onto
every log record emitted inside the scope by ``ContextualFilter``.
"""

import uuid
from contextvars import ContextVar, Token
from typing import Any, Dict, Optional

_context: ContextVar[Dict[str, Any]] = ContextVar("jobboard_log_context", default={})


def get_log_context() -> Dict[str, Any]:
    """Return a copy of the active context fields."""
    return dict(_context.get())


def push_log_context(**fields: Any) -> Token:
    """Merge fields into the active context.

    Returns:
        Token to hand back to ``pop_log_context``
    """
    return _context.set({**_context.get(), **fields})


def pop_log_context(token: Token) -> None:
    """Restore the context that was active before ``push_log_context``."""
    _context.reset(token)


def clear_log_context() -> None:
    """Drop every context field. Used by tests."""
    _context.set({})


def new_request_id() -> str:
    """Short identifier correlating the log lines of one request."""
    return uuid.uuid4().hex[:12]


class log_context:
    """Context manager pushing fields for the duration of a block.

    Example:
        >>> with log_context(request_id=new_request_id(), command="feed"):
        ...     logger.info("Rendering feed", extra={"event": "feed.render.started"})
    """

    def __init__(self, **fields: Any):
        self.fields = fields
        self._token: Optional[Token] = None

    def __enter__(self) -> "log_context":
        self._token = push_log_context(**self.fields)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if self._token is not None:
            pop_log_context(self._token)
            self._token = None
        return False
