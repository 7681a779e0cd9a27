"""
Top-level router of the Orders API.

Mounted under ``/api`` by ``create_app``.
"""

from fastapi import APIRouter

from .endpoints import orders

router = APIRouter()

router.include_router(orders.router, prefix="/orders", tags=["orders"])
