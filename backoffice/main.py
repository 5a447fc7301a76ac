"""
Main FastAPI application entry point.
Configures the app, middleware, routers, and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from typing import Any, Dict, Optional
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from backoffice.config import Settings, settings
from backoffice.domain.repositories.store import BackingStore
from backoffice.infrastructure.events.event_setup import initialize_event_system
from backoffice.infrastructure.stores import build_store, prepare_store
from backoffice.infrastructure.web.middleware.error_handler import ErrorHandlerMiddleware
from backoffice.infrastructure.web.routers import (
    projects, project_types, invoices, clients, companies, notifications
)

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def create_application(config: Optional[Settings] = None, store: Optional[BackingStore] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.
    A store may be passed in; otherwise one is built from the settings at startup.
    """
    config = config or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        logger.info(f"Starting {config.api_title} v{config.api_version}")
        logger.info(f"Environment: {config.environment}")

        initialize_event_system()

        app.state.store = store or build_store(config)
        await prepare_store(app.state.store, config)

        yield

        # Shutdown
        logger.info("Shutting down application")
        await app.state.store.close()

    app = FastAPI(
        title=config.api_title,
        version=config.api_version,
        debug=config.debug,
        docs_url=f"{config.api_prefix}/docs",
        openapi_url=f"{config.api_prefix}/openapi.json",
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=config.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(ErrorHandlerMiddleware)

    # Include routers
    app.include_router(
        projects.router,
        prefix=f"{config.api_prefix}/projects",
        tags=["Projects"]
    )
    app.include_router(
        project_types.router,
        prefix=f"{config.api_prefix}/project-types",
        tags=["Project Types"]
    )
    app.include_router(
        invoices.router,
        prefix=f"{config.api_prefix}/invoices",
        tags=["Invoices"]
    )
    app.include_router(
        clients.router,
        prefix=f"{config.api_prefix}/clients",
        tags=["Clients"]
    )
    app.include_router(
        companies.router,
        prefix=f"{config.api_prefix}/companies",
        tags=["Companies"]
    )
    app.include_router(
        notifications.router,
        prefix=f"{config.api_prefix}/notifications",
        tags=["Notifications"]
    )

    @app.get("/")
    async def root() -> Dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": config.api_title,
            "version": config.api_version,
            "environment": config.environment,
            "docs": f"{config.api_prefix}/docs",
            "health": f"{config.api_prefix}/health"
        }

    @app.get(f"{config.api_prefix}/health")
    async def health_check() -> Dict[str, Any]:
        """Health check endpoint for monitoring."""
        return {
            "status": "healthy",
            "environment": config.environment,
            "version": config.api_version,
            "store": config.store_backend
        }

    @app.exception_handler(404)
    async def not_found_handler(request: Request, exc):
        """Custom 404 error handler."""
        detail = getattr(exc, "detail", None)
        if not detail or detail == "Not Found":
            detail = f"The path {request.url.path} was not found"
        return JSONResponse(
            status_code=404,
            content={
                "error": "Not Found",
                "message": detail,
                "path": request.url.path
            }
        )

    return app


# Create the FastAPI app instance
app = create_application()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "backoffice.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level="debug" if settings.debug else "info",
    )
