# src/logging/context.py — v2
"""Contextual logging support — attach request_id, operation and query to log records."""

from __future__ import annotations

import contextvars
import uuid
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterator

_request_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "request_id", default=None
)
_operation: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "operation", default=None
)
_query: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "query", default=None
)


@dataclass
class LogContext:
    """Immutable snapshot of current logging context."""

    request_id: str | None = None
    operation: str | None = None
    query: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    """Snapshot current context variables."""
    return LogContext(
        request_id=_request_id.get(),
        operation=_operation.get(),
        query=_query.get(),
    )


def new_request_id() -> str:
    return uuid.uuid4().hex[:12]


def set_request_context(
    operation: str, query: str | None = None, request_id: str | None = None
) -> str:
    """Set request-level context. Returns the request id in effect."""
    rid = request_id or new_request_id()
    _request_id.set(rid)
    _operation.set(operation)
    _query.set(query)
    return rid


@contextmanager
def request_context(
    operation: str, query: str | None = None, request_id: str | None = None
) -> Iterator[str]:
    """Scope a request context, restoring the previous one on exit."""
    tokens = (
        _request_id.set(request_id or new_request_id()),
        _operation.set(operation),
        _query.set(query),
    )
    try:
        yield _request_id.get()  # type: ignore[misc]
    finally:
        _query.reset(tokens[2])
        _operation.reset(tokens[1])
        _request_id.reset(tokens[0])


def clear_context() -> None:
    """Reset all context variables."""
    _request_id.set(None)
    _operation.set(None)
    _query.set(None)
