"""
API dependencies.

The service is built once by ``create_app`` and kept on
``app.state``; this function hands it to the endpoints through
FastAPI's ``Depends``.
"""

from fastapi import Request

from amazon_api.orders.services.order_service import OrderService


def get_order_service(request: Request) -> OrderService:
    """Return the ``OrderService`` of the running application."""
    return request.app.state.order_service
