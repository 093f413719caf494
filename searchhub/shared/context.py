"""Request context management using contextvars.

Holds the request and correlation IDs for the current request so log
records and absorbed-provider warnings can be tied back to one search.
Set by RequestIDMiddleware and CorrelationIDMiddleware.

Usage:
    set_request_id("0f3c...")
    request_id = get_request_id()
"""

from contextvars import ContextVar

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)
_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)


def set_request_id(request_id: str | None) -> None:
    """Set the request ID for the current async task."""
    _request_id.set(request_id)


def get_request_id() -> str | None:
    """Return the current request ID, or None outside a request."""
    return _request_id.get()


def set_correlation_id(correlation_id: str | None) -> None:
    """Set the correlation ID for the current async task."""
    _correlation_id.set(correlation_id)


def get_correlation_id() -> str | None:
    """Return the current correlation ID, or None outside a request."""
    return _correlation_id.get()
