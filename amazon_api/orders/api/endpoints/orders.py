"""
Order endpoints.

These routes expose CRUD over orders.  A missing order is answered
with 404 and an empty body; no error payload is defined.  Creation
returns 201 without a ``Location`` header.
"""

from typing import List, Union
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from amazon_api.orders.api.dependencies import get_order_service
from amazon_api.orders.api.routing import DecimalJSONRoute
from amazon_api.orders.schemas.order import OrderRead, OrderRequest
from amazon_api.orders.services.order_service import OrderService

router = APIRouter(route_class=DecimalJSONRoute)


def _not_found() -> Response:
    return Response(status_code=status.HTTP_404_NOT_FOUND)


@router.get("", response_model=List[OrderRead])
async def get_orders(
    service: OrderService = Depends(get_order_service),
) -> List[OrderRead]:
    """Return all orders; an empty store yields an empty list."""
    orders = await service.get_all()
    return [OrderRead.model_validate(order) for order in orders]


@router.get(
    "/{order_id}",
    response_model=OrderRead,
    responses={404: {"description": "Order not found"}},
)
async def get_order(
    order_id: UUID,
    service: OrderService = Depends(get_order_service),
) -> Union[OrderRead, Response]:
    order = await service.get_by_id(order_id)
    if order is None:
        return _not_found()
    return OrderRead.model_validate(order)


@router.post("", response_model=OrderRead, status_code=status.HTTP_201_CREATED)
async def create_order(
    order_in: OrderRequest,
    service: OrderService = Depends(get_order_service),
) -> OrderRead:
    """Create an order.  A missing ``status`` defaults to ``PENDING``."""
    order = await service.create(order_in)
    return OrderRead.model_validate(order)


@router.put(
    "/{order_id}",
    response_model=OrderRead,
    responses={404: {"description": "Order not found"}},
)
async def update_order(
    order_id: UUID,
    order_in: OrderRequest,
    service: OrderService = Depends(get_order_service),
) -> Union[OrderRead, Response]:
    """Partially update an order.

    Only fields present and non-null in the body are changed.
    """
    order = await service.update(order_id, order_in)
    if order is None:
        return _not_found()
    return OrderRead.model_validate(order)


@router.delete(
    "/{order_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"description": "Order not found"}},
)
async def delete_order(
    order_id: UUID,
    service: OrderService = Depends(get_order_service),
) -> Response:
    deleted = await service.delete(order_id)
    if not deleted:
        return _not_found()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
