"""
Business logic for orders.

``OrderService`` implements create/read/update/delete on top of an
``OrderRepository``.  It owns the timestamps (the store never sets
them), applies the ``PENDING`` default on creation and merges partial
updates field by field.  Absence is reported with ``None``/``False``
rather than exceptions so the API layer can map it to 404.  Storage
errors are not caught here.

Repository calls within one operation are awaited in order: an update
reads before it writes and a delete checks existence before deleting.
There is no version column, so two concurrent updates of the same
order are last-writer-wins.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, List, Optional
from uuid import UUID

from amazon_api.orders.models import Order
from amazon_api.orders.repositories import OrderRepository
from amazon_api.orders.schemas.order import OrderRequest

logger = logging.getLogger(__name__)

DEFAULT_STATUS = "PENDING"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OrderService:
    """Service class for managing orders."""

    def __init__(
        self,
        repository: OrderRepository,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self.repository = repository
        self.clock = clock

    async def get_all(self) -> List[Order]:
        """Return all stored orders (empty list if there are none)."""
        return await self.repository.find_all()

    async def get_by_id(self, order_id: UUID) -> Optional[Order]:
        return await self.repository.find_by_id(order_id)

    async def create(self, request: OrderRequest) -> Order:
        """Create and persist a new order.

        The id is left to the repository.  ``status`` defaults to
        ``PENDING`` and both timestamps are set to the same instant.
        """
        now = self.clock()
        order = Order(
            id=None,
            customer_email=request.customer_email,
            description=request.description,
            total_amount=request.total_amount,
            status=request.status if request.status is not None else DEFAULT_STATUS,
            created_at=now,
            updated_at=now,
        )
        saved = await self.repository.save(order)
        logger.info("Created order %s", saved.id)
        return saved

    async def update(self, order_id: UUID, request: OrderRequest) -> Optional[Order]:
        """Merge non-null fields of ``request`` into an existing order.

        Returns the updated order, or ``None`` if no order with
        ``order_id`` exists.  A missing order is never created.
        """
        existing = await self.repository.find_by_id(order_id)
        if existing is None:
            return None
        if request.customer_email is not None:
            existing.customer_email = request.customer_email
        if request.description is not None:
            existing.description = request.description
        if request.total_amount is not None:
            existing.total_amount = request.total_amount
        if request.status is not None:
            existing.status = request.status
        existing.updated_at = self._next_update_time(existing.updated_at)
        saved = await self.repository.save(existing)
        logger.info("Updated order %s", order_id)
        return saved

    async def delete(self, order_id: UUID) -> bool:
        """Delete an order by id.

        Returns ``True`` if the order existed and was deleted,
        ``False`` otherwise.
        """
        if not await self.repository.exists_by_id(order_id):
            return False
        await self.repository.delete_by_id(order_id)
        logger.info("Deleted order %s", order_id)
        return True

    def _next_update_time(self, previous: Optional[datetime]) -> datetime:
        now = self.clock()
        # updated_at must move forward even if the clock has not.
        if previous is not None and now <= previous:
            return previous + timedelta(microseconds=1)
        return now
