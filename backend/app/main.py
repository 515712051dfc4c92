"""
FastAPI application entry point.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.config import settings
from app.api.router import api_router
from app.error_handlers import register_error_handlers
from app.logging_config import configure_logging

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        description="Catalog API for the Beyond TCG collectible card marketplace",
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["GET", "HEAD", "PUT", "PATCH", "POST", "DELETE"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # Include API router
    app.include_router(api_router, prefix=settings.api_prefix)

    @app.get("/")
    def read_root():
        """Root endpoint."""
        return {
            "name": settings.app_name,
            "version": "1.0.0",
            "status": "running"
        }

    @app.get(f"{settings.api_prefix}/health")
    def health_check():
        """Health check endpoint."""
        return {
            "status": "ok",
            "app_name": settings.app_name
        }

    logger.info(f"{settings.app_name} API ready under {settings.api_prefix}")
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host=settings.api_host, port=settings.api_port)
