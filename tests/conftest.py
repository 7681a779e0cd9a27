"""
Shared fixtures.

Every test gets its own SQLite files under ``tmp_path`` so tests never
touch the databases configured for a real deployment.
"""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from amazon_api.core.config import Settings
from amazon_api.core.db import init_db
from amazon_api.orders.main import create_app as create_orders_app
from amazon_api.orders.migrations import MIGRATIONS as ORDER_MIGRATIONS
from amazon_api.orders.repositories import SQLiteOrderRepository
from amazon_api.users.main import create_app as create_users_app
from amazon_api.users.migrations import MIGRATIONS as USER_MIGRATIONS
from amazon_api.users.repositories import SQLiteUserRepository


class TickingClock:
    """Clock that advances by ``step`` on every call."""

    def __init__(self, start=None, step=timedelta(seconds=1)):
        self.current = start or datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
        self.step = step

    def __call__(self) -> datetime:
        value = self.current
        self.current += self.step
        return value


@pytest.fixture
def test_settings(tmp_path):
    return Settings(
        orders_database_url=str(tmp_path / "orders.db"),
        users_database_url=str(tmp_path / "users.db"),
        log_level="DEBUG",
    )


@pytest.fixture
def orders_db(tmp_path):
    path = str(tmp_path / "orders.db")
    init_db(path, ORDER_MIGRATIONS)
    return path


@pytest.fixture
def users_db(tmp_path):
    path = str(tmp_path / "users.db")
    init_db(path, USER_MIGRATIONS)
    return path


@pytest.fixture
def order_repository(orders_db):
    return SQLiteOrderRepository(orders_db)


@pytest.fixture
def clock():
    return TickingClock()


@pytest.fixture
def user_repository(users_db, clock):
    return SQLiteUserRepository(users_db, clock=clock)


@pytest.fixture
def orders_client(test_settings):
    app = create_orders_app(test_settings)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def users_client(test_settings):
    app = create_users_app(test_settings)
    with TestClient(app) as client:
        yield client
