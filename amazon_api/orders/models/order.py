"""
Order entity and its row mapping.

``Order`` is the stored representation used between the service and
the repository.  It is a plain dataclass; conversion to and from
SQLite rows is explicit.  ``total_amount`` is kept as ``Decimal`` and
stored as text so monetary values survive the round trip exactly.
Timestamps are timezone-aware UTC datetimes stored in ISO-8601 form.
"""

import sqlite3
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Optional
from uuid import UUID


@dataclass
class Order:
    id: Optional[UUID] = None
    customer_email: Optional[str] = None
    description: Optional[str] = None
    total_amount: Optional[Decimal] = None
    status: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> "Order":
        """Build an ``Order`` from a row of the ``orders`` table."""
        amount = row["total_amount"]
        return cls(
            id=UUID(row["id"]),
            customer_email=row["customer_email"],
            description=row["description"],
            total_amount=Decimal(amount) if amount is not None else None,
            status=row["status"],
            created_at=_parse_timestamp(row["created_at"]),
            updated_at=_parse_timestamp(row["updated_at"]),
        )

    def to_row(self) -> Dict[str, Any]:
        """Return the column values for an INSERT/UPDATE statement."""
        return {
            "id": str(self.id) if self.id is not None else None,
            "customer_email": self.customer_email,
            "description": self.description,
            "total_amount": str(self.total_amount) if self.total_amount is not None else None,
            "status": self.status,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }


def _parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    if value is None:
        return None
    return datetime.fromisoformat(value)
