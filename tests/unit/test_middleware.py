"""Raw ASGI middlewares exercised through httpx.ASGITransport."""

import asyncio

from httpx import ASGITransport, AsyncClient

from searchhub.middleware import CorrelationIDMiddleware, RequestIDMiddleware, TimeoutMiddleware
from searchhub.middleware.request_id import sanitize_request_id


def plain_app(delay: float = 0.0, seen: list | None = None):
    async def app(scope, receive, send) -> None:
        if seen is not None:
            seen.append(dict(scope.get("state", {})))
        await asyncio.sleep(delay)
        await send({"type": "http.response.start", "status": 200, "headers": []})
        await send({"type": "http.response.body", "body": b"done"})

    return app


async def call(app, headers: dict | None = None):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        return await client.get("/x", headers=headers or {})


def test_sanitize_request_id() -> None:
    assert sanitize_request_id("abc_DEF-123") == "abc_DEF-123"
    assert sanitize_request_id("x" * 65) != "x" * 65
    assert len(sanitize_request_id(None)) == 36


async def test_slow_request_gets_504() -> None:
    response = await call(TimeoutMiddleware(plain_app(delay=1.0), timeout_seconds=0.05))
    assert response.status_code == 504
    body = response.json()
    assert body["error_code"] == "GATEWAY_TIMEOUT"
    assert body["details"] == {"timeout_seconds": 0.05}


async def test_fast_request_passes_through() -> None:
    response = await call(TimeoutMiddleware(plain_app(), timeout_seconds=5))
    assert response.status_code == 200
    assert response.content == b"done"


async def test_ids_are_stored_on_scope_state() -> None:
    seen: list[dict] = []
    app = RequestIDMiddleware(CorrelationIDMiddleware(plain_app(seen=seen)))
    response = await call(app, {"X-Request-ID": "req-7"})
    assert seen == [{"request_id": "req-7", "correlation_id": "req-7"}]
    assert response.headers["X-Request-ID"] == "req-7"
    assert response.headers["X-Correlation-ID"] == "req-7"
