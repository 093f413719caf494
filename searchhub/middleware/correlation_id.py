"""Correlation ID middleware.

Propagates X-Correlation-ID across services: the client's value when
given, else the request ID, else a new UUID. Must run inside
RequestIDMiddleware so the request ID is already on scope state.
"""

import uuid
from collections.abc import Callable

from searchhub.middleware._headers import get_header, with_response_header
from searchhub.middleware.request_id import REQUEST_ID_MAX_LENGTH
from searchhub.shared.context import set_correlation_id


def CorrelationIDMiddleware(
    app: Callable, header_name: str = "X-Correlation-ID"
) -> Callable:
    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        correlation_id = (get_header(scope, header_name) or "").strip()[:REQUEST_ID_MAX_LENGTH]
        if not correlation_id:
            correlation_id = scope.get("state", {}).get("request_id") or str(uuid.uuid4())
        scope.setdefault("state", {})["correlation_id"] = correlation_id
        set_correlation_id(correlation_id)
        await app(scope, receive, with_response_header(send, header_name, correlation_id))

    return asgi_app
