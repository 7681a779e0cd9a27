"""
Storage interface for orders and its SQLite implementation.

``OrderRepository`` is the minimal set of persistence operations the
service depends on.  ``SQLiteOrderRepository`` implements it with
parameterised statements against the ``orders`` table.  sqlite3 is a
blocking driver, so every operation runs in Starlette's thread pool
and the coroutine only resumes once the statement has finished.
Each call opens and closes its own connection.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import replace
from typing import List, Optional
from uuid import UUID, uuid4

from fastapi.concurrency import run_in_threadpool

from amazon_api.core.db import get_cursor
from amazon_api.orders.models import Order

logger = logging.getLogger(__name__)


class OrderRepository(ABC):
    """Persistence operations over ``Order`` entities."""

    @abstractmethod
    async def find_all(self) -> List[Order]:
        """Return every stored order."""

    @abstractmethod
    async def find_by_id(self, order_id: UUID) -> Optional[Order]:
        """Return the order with ``order_id`` or ``None``."""

    @abstractmethod
    async def save(self, order: Order) -> Order:
        """Insert or update ``order`` and return the stored state.

        An order without an ``id`` is new: the store assigns one.
        """

    @abstractmethod
    async def delete_by_id(self, order_id: UUID) -> None:
        """Delete the order with ``order_id``; a missing id is a no-op."""

    @abstractmethod
    async def exists_by_id(self, order_id: UUID) -> bool:
        """Return ``True`` if an order with ``order_id`` is stored."""


class SQLiteOrderRepository(OrderRepository):
    """``OrderRepository`` backed by a SQLite database file."""

    def __init__(self, db_path: str) -> None:
        self.db_path = db_path

    async def find_all(self) -> List[Order]:
        return await run_in_threadpool(self._find_all)

    async def find_by_id(self, order_id: UUID) -> Optional[Order]:
        return await run_in_threadpool(self._find_by_id, order_id)

    async def save(self, order: Order) -> Order:
        return await run_in_threadpool(self._save, order)

    async def delete_by_id(self, order_id: UUID) -> None:
        await run_in_threadpool(self._delete_by_id, order_id)

    async def exists_by_id(self, order_id: UUID) -> bool:
        return await run_in_threadpool(self._exists_by_id, order_id)

    def _find_all(self) -> List[Order]:
        with get_cursor(self.db_path) as cursor:
            rows = cursor.execute("SELECT * FROM orders ORDER BY rowid").fetchall()
        return [Order.from_row(row) for row in rows]

    def _find_by_id(self, order_id: UUID) -> Optional[Order]:
        with get_cursor(self.db_path) as cursor:
            row = cursor.execute(
                "SELECT * FROM orders WHERE id = ?", (str(order_id),)
            ).fetchone()
        if not row:
            return None
        return Order.from_row(row)

    def _save(self, order: Order) -> Order:
        if order.id is None:
            order = replace(order, id=uuid4())
        values = order.to_row()
        with get_cursor(self.db_path) as cursor:
            cursor.execute(
                """
                INSERT INTO orders (id, customer_email, description, total_amount, status, created_at, updated_at)
                VALUES (:id, :customer_email, :description, :total_amount, :status, :created_at, :updated_at)
                ON CONFLICT(id) DO UPDATE SET
                    customer_email = excluded.customer_email,
                    description = excluded.description,
                    total_amount = excluded.total_amount,
                    status = excluded.status,
                    created_at = excluded.created_at,
                    updated_at = excluded.updated_at
                """,
                values,
            )
            row = cursor.execute(
                "SELECT * FROM orders WHERE id = ?", (values["id"],)
            ).fetchone()
        logger.debug("Saved order %s", values["id"])
        return Order.from_row(row)

    def _delete_by_id(self, order_id: UUID) -> None:
        with get_cursor(self.db_path) as cursor:
            cursor.execute("DELETE FROM orders WHERE id = ?", (str(order_id),))

    def _exists_by_id(self, order_id: UUID) -> bool:
        with get_cursor(self.db_path) as cursor:
            row = cursor.execute(
                "SELECT 1 FROM orders WHERE id = ?", (str(order_id),)
            ).fetchone()
        return row is not None
