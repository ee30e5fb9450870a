"""
Portfolio FastAPI Application
Entry point for the contact form and chatbot API.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from portfolio.api import chatbot, contact, health
from portfolio.core.config import Settings, get_settings
from portfolio.core.cors import AllowListCORSMiddleware
from portfolio.core.exceptions import MethodError
from portfolio.core.sentry import capture_exception, init_sentry
from portfolio.database import close_db, init_db
from portfolio.services.container import Services, build_services
from portfolio.services.normalizer import error_response, method_not_allowed

# =============================================================================
# Logging Configuration
# =============================================================================

logging.basicConfig(
    level=logging.DEBUG if get_settings().debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# =============================================================================
# Startup Validation
# =============================================================================


def validate_settings(settings: Settings) -> None:
    """
    Check credentials needed by the collaborators.

    Missing credentials are warnings in development and fatal in production.
    """
    missing = []
    if not settings.sendgrid_api_key:
        missing.append("SENDGRID_API_KEY")
    if not settings.anthropic_api_key:
        missing.append("ANTHROPIC_API_KEY")
    if not settings.allowed_origins:
        missing.append("CORS_ORIGINS")

    if not missing:
        return

    message = f"Missing configuration: {', '.join(missing)}"
    if settings.is_production:
        logger.error(f"CONFIG ERROR: {message}")
        raise RuntimeError(f"Cannot start in production: {message}")
    logger.warning(f"CONFIG WARNING: {message}")


# =============================================================================
# Application Factory
# =============================================================================


def create_app(settings: Optional[Settings] = None, services: Optional[Services] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Configuration; defaults to the environment-loaded settings.
        services: Pre-built collaborators. When omitted they are opened in
            the lifespan and closed on shutdown.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Startup:
        - Validate configuration
        - Initialize Sentry
        - Open the store engine and the mail/generator clients

        Shutdown:
        - Dispose of the store engine
        """
        logger.info(f"Starting {settings.app_name} {settings.app_version} ({settings.environment})")
        owns_services = app.state.services is None

        if owns_services:
            validate_settings(settings)
            if init_sentry(settings):
                logger.info("Sentry error tracking enabled")
            app.state.services = build_services(settings)

            # In production, use migrations instead
            if settings.debug and app.state.services.engine is not None:
                try:
                    await init_db(app.state.services.engine)
                    logger.info("Database initialized successfully")
                except Exception as e:
                    logger.error(f"Database initialization failed: {e}")

        logger.info("Application startup complete")

        yield

        logger.info(f"Shutting down {settings.app_name}...")
        if owns_services and app.state.services.engine is not None:
            await close_db(app.state.services.engine)
            logger.info("Database connections closed")

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Contact form and chatbot endpoints for a personal portfolio site.",
        version=settings.app_version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
    )
    app.state.services = services

    # =========================================================================
    # CORS Middleware
    # =========================================================================

    app.add_middleware(
        AllowListCORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=settings.cors_allow_credentials,
    )

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    @app.exception_handler(MethodError)
    async def method_error_handler(request: Request, exc: MethodError) -> JSONResponse:
        return method_not_allowed()

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        """Render routing errors (404, 405) in the shared error envelope."""
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            return method_not_allowed()
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle unexpected exceptions without exposing internals."""
        logger.exception(f"Unexpected error: {exc!r}")
        capture_exception(
            exc,
            extra={
                "request_method": request.method,
                "request_path": request.url.path,
            },
        )
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    # =========================================================================
    # Routers
    # =========================================================================

    app.include_router(health.router)
    app.include_router(contact.router)
    app.include_router(chatbot.router)

    @app.get("/", tags=["Root"], response_class=PlainTextResponse, summary="Liveness")
    async def root() -> str:
        return settings.liveness_message

    return app


app = create_app()


# For running with uvicorn directly
if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run(
        "portfolio.main:app",
        host=_settings.host,
        port=_settings.port,
        reload=_settings.debug,
        log_level="debug" if _settings.debug else "info",
    )
