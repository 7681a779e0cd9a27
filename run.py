"""Unified entry point for the Users and Orders services.

This script launches both FastAPI applications concurrently, each on
its own port, in a single process.  Hosts and ports come from
``amazon_api.core.config`` (``USERS_HOST``/``USERS_PORT`` and
``ORDERS_HOST``/``ORDERS_PORT``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from amazon_api.core.config import settings
from amazon_api.core.logging_config import setup_logging
from amazon_api.orders.main import app as orders_app
from amazon_api.users.main import app as users_app


async def serve(app, host: str, port: int) -> None:
    """Serve ``app`` with Uvicorn until the server exits."""
    config = Config(app=app, host=host, port=port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


async def main() -> None:
    """Run both services concurrently; the first failure stops the other."""
    setup_logging(settings)
    tasks = [
        asyncio.create_task(serve(users_app, settings.users_host, settings.users_port)),
        asyncio.create_task(serve(orders_app, settings.orders_host, settings.orders_port)),
    ]
    done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    for task in done:
        if exception := task.exception():
            logging.exception("Exception in service", exc_info=exception)
    for task in pending:
        task.cancel()
    await asyncio.gather(*pending, return_exceptions=True)


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
