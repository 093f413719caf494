"""Request ID middleware.

Forwards a sane client X-Request-ID or mints one, stores it in scope state
and in the request contextvar (picked up by the log filter), and echoes it
on the response. Raw ASGI, no BaseHTTPMiddleware.
"""

import re
import uuid
from collections.abc import Callable

from searchhub.middleware._headers import get_header, with_response_header
from searchhub.shared.context import set_request_id

REQUEST_ID_MAX_LENGTH = 64
REQUEST_ID_ALLOWED_PATTERN = re.compile(
    r"^[a-zA-Z0-9_-]{1," + str(REQUEST_ID_MAX_LENGTH) + r"}$"
)


def sanitize_request_id(raw: str | None) -> str:
    """Return raw when it is safe to log, otherwise a fresh UUID."""
    candidate = (raw or "").strip()
    if not REQUEST_ID_ALLOWED_PATTERN.match(candidate):
        return str(uuid.uuid4())
    return candidate


def RequestIDMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    """Add or forward the request ID header on each request and response."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        request_id = sanitize_request_id(get_header(scope, header_name))
        scope.setdefault("state", {})["request_id"] = request_id
        set_request_id(request_id)
        await app(scope, receive, with_response_header(send, header_name, request_id))

    return asgi_app
