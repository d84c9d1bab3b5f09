"""
FastAPI application entrypoint.

- Configures CORS and per-request access logging.
- Registers standardized error handlers.
- Initializes structured logging.
- Opens the storage client before serving and closes it on shutdown (lifespan).
- Includes the API routers and, when present, the static landing page at "/".

Run locally:
  uvicorn storefront.main:app --reload --port 3000
  storefront            # console script; honours HOST / PORT
"""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from storefront.api.router import router as api_router
from storefront.core.config import Settings, get_settings
from storefront.core.errors import register_exception_handlers
from storefront.core.logging import RequestLoggingMiddleware, init_logging
from storefront.db.session import Database

log = logging.getLogger(__name__)

APP_VERSION = "0.1.0"


def _create_database(settings: Settings) -> Database:
    return Database(
        settings.database_url,
        echo=settings.sqlalchemy_echo,
        create_tables=settings.auto_create_tables,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the storage client before serving; always close it on the way out."""
    database: Database = app.state.database
    database.init()
    settings = app.state.settings
    log.info("Storefront API started", extra={"app_env": settings.app_env})
    try:
        yield
    finally:
        log.info("Storefront API shutting down")
        database.close()


def get_application(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """
    Construct the FastAPI app with CORS, logging, routers, and error handlers.

    The storage client is injected (or built from settings) and kept on app.state.database.
    """
    settings = settings or get_settings()
    init_logging(settings.log_level)

    app = FastAPI(title="Storefront API", version=os.getenv("APP_VERSION", APP_VERSION), lifespan=lifespan)
    app.state.settings = settings
    app.state.database = database or _create_database(settings)

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)
    register_exception_handlers(app)

    # Mounted after the API routes so /users, /stores, ... take precedence
    if settings.public_dir and os.path.isdir(settings.public_dir):
        app.mount("/", StaticFiles(directory=settings.public_dir, html=True), name="public")

    return app


# ASGI application
app = get_application()


def run() -> None:
    """Console entry: serve the app with uvicorn on HOST:PORT."""
    import uvicorn

    settings = app.state.settings
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
