"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (health, API index, items)
- Error handlers (centralized classification and envelope rendering)
- Security middleware (headers, CORS, rate limiting, body size limit)
- Request logging
- Logging configuration

No business logic belongs here.
"""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from itemapi.core.config import Settings, ensure_upload_path
from itemapi.infrastructure.database import build_engine, create_schema
from itemapi.interfaces.health import router as health_router
from itemapi.interfaces.items.router import router as items_router
from itemapi.interfaces.root import diagnostics_router
from itemapi.interfaces.root import router as root_router
from itemapi.shared.errors.handlers import register_error_handlers
from itemapi.shared.errors.middleware import ErrorEnvelopeMiddleware
from itemapi.shared.logging import configure_logging
from itemapi.shared.middleware.body_limit import BodySizeLimitMiddleware
from itemapi.shared.middleware.request_logging import RequestLoggingMiddleware
from itemapi.shared.security.headers import SecurityHeadersMiddleware
from itemapi.shared.security.rate_limiting import (
    build_limiter,
    rate_limit_exceeded_handler,
)

logger = logging.getLogger(__name__)

API_PREFIX = "/api"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: prepare storage, then release it on shutdown."""
    settings: Settings = app.state.settings
    ensure_upload_path(settings)
    create_schema(app.state.engine)
    logger.info("%s started in %s mode", settings.project_name, settings.node_env)

    yield

    app.state.engine.dispose()
    logger.info("%s shutting down", settings.project_name)


def create_app(settings: Settings) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and middleware.
    This is the composition root of the application.

    Args:
        settings: Configuration built once at startup.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.started_at = time.monotonic()
    app.state.engine = build_engine(settings.database_url)

    # --- Rate Limiting ---
    app.state.limiter = build_limiter(settings.rate_limit)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # --- Error Handlers ---
    register_error_handlers(app, include_stack=settings.debug)

    # --- Middleware (last added runs first) ---
    app.add_middleware(BodySizeLimitMiddleware, max_bytes=settings.max_request_size_bytes)
    app.add_middleware(SlowAPIMiddleware)
    app.add_middleware(ErrorEnvelopeMiddleware, include_stack=settings.debug)
    app.add_middleware(RequestLoggingMiddleware)
    if settings.enable_cors:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(root_router, prefix=API_PREFIX)
    app.include_router(items_router, prefix=API_PREFIX)
    if settings.debug:
        app.include_router(diagnostics_router, prefix=API_PREFIX)

    return app
