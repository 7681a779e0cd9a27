"""
Main entrypoint for the Orders service.

This module assembles the FastAPI application: it sets up logging,
constructs the repository and service once, and mounts the order
routes under ``/api``.  The database schema is brought up to date in
the application lifespan.  The ``app`` instance created at import
time can be served directly::

    uvicorn amazon_api.orders.main:app --port 8081
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.concurrency import run_in_threadpool

from amazon_api.core.config import Settings, settings
from amazon_api.core.db import get_database_path, init_db
from amazon_api.core.errors import register_error_handlers
from amazon_api.core.logging_config import setup_logging
from amazon_api.orders.api.router import router as api_router
from amazon_api.orders.migrations import MIGRATIONS
from amazon_api.orders.repositories import SQLiteOrderRepository
from amazon_api.orders.services.order_service import OrderService


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the Orders FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the module-level ``settings``.
        Tests pass their own to point at a temporary database.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    setup_logging(app_settings)

    db_path = get_database_path(app_settings.orders_database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await run_in_threadpool(init_db, db_path, MIGRATIONS)
        yield

    app = FastAPI(
        title=f"{app_settings.project_name} - Orders",
        version=app_settings.api_version,
        debug=app_settings.debug,
        lifespan=lifespan,
    )
    app.state.order_service = OrderService(SQLiteOrderRepository(db_path))

    register_error_handlers(app)
    app.include_router(api_router, prefix="/api")
    return app


app = create_app()
