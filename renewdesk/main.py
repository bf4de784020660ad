"""
Main FastAPI application entry point.
Configures the app, middleware, routers, and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from typing import Any, Dict, Optional
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from fastapi.responses import JSONResponse

from renewdesk.application.use_cases.base_use_case import Clock, utc_now
from renewdesk.config import Settings, settings as default_settings
from renewdesk.domain.services.status_classifier import StatusRules
from renewdesk.infrastructure.repositories import InMemoryDatabase, Latency, seed_demo_data
from renewdesk.infrastructure.web.middleware.error_handler import ErrorHandlerMiddleware
from renewdesk.infrastructure.web.routers import (
    contracts,
    customers,
    dashboard,
    notifications,
)

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if default_settings.debug else logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifecycle.
    Setup and teardown operations.
    """
    settings: Settings = app.state.settings
    database: InMemoryDatabase = app.state.database

    # Startup
    logger.info(f"Starting {settings.api_title} v{settings.api_version}")
    logger.info(f"Environment: {settings.environment}")

    if settings.seed_demo_data and not database.customers:
        seed_demo_data(database, app.state.clock())

    yield

    # Shutdown
    logger.info("Shutting down application")


def create_application(
    settings: Optional[Settings] = None,
    database: Optional[InMemoryDatabase] = None,
    clock: Clock = utc_now,
) -> FastAPI:
    """
    Create and configure the FastAPI application.
    """
    settings = settings or default_settings

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        debug=settings.debug,
        docs_url=f"{settings.api_prefix}/docs" if settings.debug else None,
        redoc_url=f"{settings.api_prefix}/redoc" if settings.debug else None,
        openapi_url=f"{settings.api_prefix}/openapi.json" if settings.debug else None,
        lifespan=lifespan
    )

    app.state.settings = settings
    app.state.database = database if database is not None else InMemoryDatabase()
    app.state.latency = Latency.from_settings(settings)
    app.state.clock = clock
    app.state.status_rules = StatusRules(
        expiring_days=settings.expiring_soon_days,
        urgent_days=settings.urgent_days,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    # Add trusted host middleware for production
    if settings.is_production:
        app.add_middleware(
            TrustedHostMiddleware,
            allowed_hosts=settings.allowed_hosts
        )

    # Add custom error handler middleware
    app.add_middleware(ErrorHandlerMiddleware, debug=settings.debug)

    # Include routers
    app.include_router(
        customers.router,
        prefix=f"{settings.api_prefix}/customers",
        tags=["Customers"]
    )
    app.include_router(
        contracts.router,
        prefix=f"{settings.api_prefix}/contracts",
        tags=["Contracts"]
    )
    app.include_router(
        notifications.router,
        prefix=f"{settings.api_prefix}/notifications",
        tags=["Notifications"]
    )
    app.include_router(
        dashboard.router,
        prefix=f"{settings.api_prefix}/dashboard",
        tags=["Dashboard"]
    )

    # Root endpoint
    @app.get("/")
    async def root() -> Dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": settings.api_title,
            "version": settings.api_version,
            "environment": settings.environment,
            "docs": f"{settings.api_prefix}/docs" if settings.debug else None,
            "health": f"{settings.api_prefix}/health"
        }

    # Health check endpoint
    @app.get(f"{settings.api_prefix}/health")
    async def health_check() -> Dict[str, Any]:
        """Health check endpoint for monitoring."""
        return {
            "status": "healthy",
            "environment": settings.environment,
            "version": settings.api_version
        }

    # Custom 404 handler
    @app.exception_handler(404)
    async def not_found_handler(request: Request, exc):
        """Custom 404 error handler; error payloads from the routers pass through."""
        detail = getattr(exc, "detail", None)
        if isinstance(detail, dict):
            return JSONResponse(status_code=404, content={"detail": detail})
        return JSONResponse(
            status_code=404,
            content={
                "error": "Not Found",
                "message": f"The path {request.url.path} was not found",
                "path": request.url.path
            }
        )

    return app


# Create the FastAPI app instance
app = create_application()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "renewdesk.main:app",
        host=default_settings.host,
        port=default_settings.port,
        reload=default_settings.is_development,
        log_level="debug" if default_settings.debug else "info",
    )
