from __future__ import annotations

import time
from contextlib import asynccontextmanager

import httpx
import sentry_sdk
from fastapi import FastAPI, Request, status
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from prometheus_fastapi_instrumentator import Instrumentator
from sentry_sdk.integrations.asyncio import AsyncioIntegration
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.starlette import StarletteIntegration

from hoyalist import __version__
from hoyalist.core.config import settings
from hoyalist.core.logging import configure_structlog, get_structlog_logger
from hoyalist.db.firestore import close_firestore, init_firestore
from hoyalist.middleware.logging import LoggingMiddleware
from hoyalist.middleware.request_id import RequestIdMiddleware
from hoyalist.routes import health_router, leads_router, pages_router, redirects_router
from hoyalist.services.geocoding import GeocoderClient
from hoyalist.services.lead_store import LeadPersister


class CachedStaticFiles(StaticFiles):
    """Static files with a public Cache-Control max-age."""

    def __init__(self, *args, max_age: int = 0, **kwargs):
        super().__init__(*args, **kwargs)
        self.max_age = max_age

    def file_response(self, *args, **kwargs):
        response = super().file_response(*args, **kwargs)
        response.headers["Cache-Control"] = f"public, max-age={self.max_age}"
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    logger = get_structlog_logger(__name__)

    # Startup
    logger.info("application.starting", environment=settings.environment)

    firestore_client = None
    try:
        firestore_client = init_firestore(settings)
    except Exception as e:
        logger.error("firestore.init_failed", error_type=type(e).__name__, error=str(e))
        if settings.is_production:
            raise

    http_client = httpx.AsyncClient(timeout=settings.geocoding_timeout_seconds)
    app.state.geocoder = GeocoderClient(
        api_key=settings.google_geocoding_api_key,
        http_client=http_client,
        url=settings.geocoding_url,
        timeout=settings.geocoding_timeout_seconds,
    )
    app.state.lead_persister = LeadPersister(firestore_client)
    if not settings.google_geocoding_api_key:
        logger.warning("geocoder.api_key_missing")

    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            integrations=[
                AsyncioIntegration(),
                FastApiIntegration(),
                StarletteIntegration(),
            ],
            traces_sample_rate=1.0 if settings.is_development else 0.1,
            send_default_pii=False,
        )
        logger.info("sentry.initialized")

    logger.info("application.started", port=settings.port)
    yield

    # Shutdown
    logger.info("application.shutting_down")
    await http_client.aclose()
    await close_firestore()
    logger.info("application.shutdown_complete")


# Configure logging before creating app
configure_structlog()
logger = get_structlog_logger(__name__)

app = FastAPI(
    title="HoyaList Homeowners",
    version=__version__,
    description="Homeowner project lead intake and app store redirects",
    docs_url="/docs" if settings.is_development else None,
    redoc_url=None,
    openapi_url="/openapi.json" if settings.is_development else None,
    lifespan=lifespan,
)

app.add_middleware(GZipMiddleware, minimum_size=1000)
app.add_middleware(LoggingMiddleware)
# Added last so it runs first and the request id is bound before logging.
app.add_middleware(RequestIdMiddleware)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    error_id = f"err_{int(time.time())}_{hash(str(exc)) % 10000:04d}"

    logger.error(
        "unhandled.exception",
        error_id=error_id,
        error_type=type(exc).__name__,
        error=str(exc),
        path=request.url.path,
        method=request.method,
    )

    message = f"Internal server error: {exc}" if settings.is_development else "Internal server error"
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"code": "internal_error", "message": message, "error_id": error_id},
        headers={"X-Error-ID": error_id},
    )


app.include_router(health_router)
app.include_router(pages_router)
app.include_router(leads_router)
app.include_router(redirects_router)

if not settings.is_testing:
    Instrumentator().instrument(app).expose(app, endpoint="/metrics", include_in_schema=False)

# Public assets; mounted last so the routes above take precedence.
app.mount(
    "/",
    CachedStaticFiles(
        directory=str(settings.public_path()),
        check_dir=False,
        max_age=settings.static_max_age_seconds,
    ),
    name="public",
)

logger.info("application.configured", environment=settings.environment)
