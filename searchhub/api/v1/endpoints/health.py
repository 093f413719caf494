"""Health check endpoints for liveness and readiness checks."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from searchhub.core.config import get_settings
from searchhub.schemas.health import HealthResponse, ReadinessResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


async def _database_state() -> str:
    if not get_settings().database_url:
        return "disabled"
    from searchhub.infrastructure.persistence.database import get_engine

    try:
        async with get_engine().connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError):
        return "unavailable"
    return "ok"


def _cache_state(request: Request) -> str:
    if not get_settings().redis_enabled:
        return "disabled"
    cache = getattr(request.app.state, "cache", None)
    if cache is None or not cache.is_available():
        return "unavailable"
    return "ok"


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"description": "A configured dependency is unreachable", "model": ReadinessResponse}},
)
async def readiness_check(request: Request) -> ReadinessResponse | JSONResponse:
    """Return 200 when every configured dependency answers; 503 otherwise.

    Disabled dependencies (no DATABASE_URL, REDIS_ENABLED=false) do not
    fail readiness. Without Redis no Graph token can be read, so searches
    will answer 401 until it is back.
    """
    checks = {"redis": _cache_state(request), "database": await _database_state()}
    if "unavailable" in checks.values():
        return JSONResponse(
            status_code=503,
            content=ReadinessResponse(status="not_ready", checks=checks).model_dump(),
        )
    return ReadinessResponse(checks=checks)
