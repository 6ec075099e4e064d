# src/friendlytime/main.py
"""Main entry point for the FriendlyTime application."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from friendlytime.api.v1 import (
    bookings_router,
    chat_router,
    friends_router,
    messages_router,
)
from friendlytime.core.logging import configure_logging
from friendlytime.core.settings import settings
from friendlytime.db.session import SessionLocal, create_tables
from friendlytime.services.registry import ConnectionRegistry
from friendlytime.services.seed import seed_demo_friends

logger = logging.getLogger(__name__)

DESCRIPTION = "Companion marketplace API with real-time chat"


def init_database() -> None:
    """Create missing tables and load demo profiles when enabled."""
    create_tables()
    if not settings.seed_demo_data:
        return
    with SessionLocal() as db:
        seed_demo_friends(db)


def create_app() -> FastAPI:
    """Build the FastAPI application with its own connection registry."""
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description=DESCRIPTION,
        version=settings.app_version,
    )
    app.state.connection_registry = ConnectionRegistry()

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    # Add GZip middleware for compression
    app.add_middleware(GZipMiddleware)

    # Include API routers
    app.include_router(friends_router, prefix=settings.api_prefix)
    app.include_router(messages_router, prefix=settings.api_prefix)
    app.include_router(bookings_router, prefix=settings.api_prefix)
    app.include_router(chat_router)

    @app.on_event("startup")
    async def on_startup() -> None:
        init_database()
        logger.info("%s %s started", settings.app_name, settings.app_version)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint to verify the service is running."""
        return {"status": "ok"}

    @app.get("/")
    async def root() -> dict[str, str]:
        """Root endpoint with basic information about the API."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "description": DESCRIPTION,
            "api": settings.api_prefix,
            "websocket": settings.ws_path,
            "docs": "/docs",
        }

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("friendlytime.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
