"""
Main entrypoint for the Users service.

Builds the FastAPI application for the Users service.  The user
repository is created here and kept on ``app.state`` so that the
database is initialised with the service even though no endpoint
reads it yet::

    uvicorn amazon_api.users.main:app --port 8080
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.concurrency import run_in_threadpool

from amazon_api.core.config import Settings, settings
from amazon_api.core.db import get_database_path, init_db
from amazon_api.core.errors import register_error_handlers
from amazon_api.core.logging_config import setup_logging
from amazon_api.users.api.router import router as api_router
from amazon_api.users.migrations import MIGRATIONS
from amazon_api.users.repositories import SQLiteUserRepository


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the Users FastAPI application."""
    app_settings = app_settings or settings
    setup_logging(app_settings)

    db_path = get_database_path(app_settings.users_database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await run_in_threadpool(init_db, db_path, MIGRATIONS)
        yield

    app = FastAPI(
        title=f"{app_settings.project_name} - Users",
        version=app_settings.api_version,
        debug=app_settings.debug,
        lifespan=lifespan,
    )
    app.state.user_repository = SQLiteUserRepository(db_path)

    register_error_handlers(app)
    app.include_router(api_router)
    return app


app = create_app()
