"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic. Used by main.py; no business
logic here, only wiring of infrastructure (HTTP client, caches, telemetry,
DB engine dispose).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from searchhub.core.config import get_settings
from searchhub.infrastructure.cache import CacheService, MemoryTTLCache
from searchhub.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: logging, shared Graph HTTP client, Redis cache (if
    enabled), Teams chat cache, telemetry (if enabled). Shutdown order:
    HTTP client close, cache disconnect, telemetry shutdown, SQL engine
    dispose.
    """
    settings = get_settings()
    setup_logging()

    # ---- Startup ----
    app.state.http_client = httpx.AsyncClient(timeout=settings.graph_timeout_seconds)

    if settings.redis_enabled:
        cache = CacheService(settings=settings)
        await cache.connect()
        app.state.cache = cache
    else:
        app.state.cache = None

    # Chat listings go to Redis when it is up, else stay in-process.
    if app.state.cache is not None and app.state.cache.is_available():
        app.state.chat_cache = app.state.cache
    else:
        app.state.chat_cache = MemoryTTLCache(default_ttl=settings.teams_chat_cache_ttl)

    if settings.telemetry_enabled:
        from searchhub.shared.telemetry.telemetry import TelemetryConfig, set_telemetry

        telemetry = TelemetryConfig(
            service_name=settings.app_name,
            service_version=settings.app_version,
            enabled=True,
            environment=settings.telemetry_environment,
        )
        telemetry.setup_telemetry(
            exporter_type=settings.telemetry_exporter,
            otlp_endpoint=settings.telemetry_otlp_endpoint,
            sample_rate=settings.telemetry_sample_rate,
        )
        set_telemetry(telemetry)
        engine = None
        if settings.database_url:
            from searchhub.infrastructure.persistence.database import get_engine

            engine = get_engine()
        telemetry.instrument(app, redis=settings.redis_enabled, engine=engine)
        logger.info("Telemetry initialized")

    logger.info("%s %s started", settings.app_name, settings.app_version)

    yield

    # ---- Shutdown ----
    if getattr(app.state, "http_client", None) is not None:
        await app.state.http_client.aclose()
        app.state.http_client = None
        logger.info("Graph HTTP client closed")

    if getattr(app.state, "cache", None) is not None:
        await app.state.cache.disconnect()
        logger.info("Cache disconnected")
    app.state.chat_cache = None

    from searchhub.shared.telemetry.telemetry import get_telemetry, set_telemetry

    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
        set_telemetry(None)
        logger.info("Telemetry shutdown complete")

    from searchhub.infrastructure.persistence import database

    if database.engine is not None:
        await database.dispose_engine()
        logger.info("Database engine disposed")
