"""
Logging setup shared by the Users and Orders services.

Both services may run in one process (see ``run.py``) and write to the
same handlers, so every record is tagged with the service it came from:
``amazon_api.orders.services.order_service`` is logged as ``orders``,
``amazon_api.core.db`` as ``core`` and anything outside the package
(uvicorn, asyncio) as ``-``.
"""

import logging
from pathlib import Path

from amazon_api.core.config import Settings

PACKAGE = "amazon_api"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(service)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Set on handlers installed here; foreign handlers are left alone.
_HANDLER_MARK = "_amazon_api_handler"


class ServiceFilter(logging.Filter):
    """Add a ``service`` attribute derived from the logger name."""

    def filter(self, record: logging.LogRecord) -> bool:
        parts = record.name.split(".")
        if parts[0] == PACKAGE and len(parts) > 1:
            record.service = parts[1]
        else:
            record.service = "-"
        return True


def _installed_handlers(logger: logging.Logger):
    return [h for h in logger.handlers if getattr(h, _HANDLER_MARK, False)]


def _make_handler(handler: logging.Handler) -> logging.Handler:
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    handler.addFilter(ServiceFilter())
    setattr(handler, _HANDLER_MARK, True)
    return handler


def setup_logging(app_settings: Settings) -> None:
    """Configure the root logger from ``app_settings``.

    The level always follows ``app_settings.log_level`` (unknown names
    fall back to INFO).  The console handler, and a file handler when
    ``app_settings.log_file`` is set, are installed only on the first
    call; later calls from the second service factory or from tests
    reuse them.  Handlers installed by someone else, such as pytest's
    capture handler, do not count as a previous call.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, app_settings.log_level.upper(), logging.INFO))

    if _installed_handlers(root):
        return

    root.addHandler(_make_handler(logging.StreamHandler()))
    if app_settings.log_file:
        log_path = Path(app_settings.log_file).resolve()
        root.addHandler(_make_handler(logging.FileHandler(log_path, encoding="utf-8")))
