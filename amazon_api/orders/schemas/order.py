"""
Pydantic schemas for orders.

``OrderRequest`` is used both to create and to update an order.  All
of its fields are optional: on creation a missing ``status`` falls
back to ``PENDING``, on update a missing (or null) field leaves the
stored value unchanged.  Unknown keys, including a client supplied
``id``, are ignored.

``OrderRead`` is the response body.  ``totalAmount`` is serialised as
a decimal string and timestamps as ISO-8601 instants.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class OrderRequest(BaseModel):
    """Schema for creating or partially updating an order."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    customer_email: Optional[str] = Field(None, examples=["customer@example.com"])
    description: Optional[str] = Field(None, examples=["Two paperback books"])
    total_amount: Optional[Decimal] = Field(None, examples=["99.99"])
    status: Optional[str] = Field(None, examples=["PENDING"])


class OrderRead(BaseModel):
    """Schema for reading an order from the API."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: UUID
    customer_email: Optional[str] = None
    description: Optional[str] = None
    total_amount: Optional[Decimal] = None
    status: str
    created_at: datetime
    updated_at: datetime
