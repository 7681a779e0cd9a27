"""
User entity and its row mapping.

A user row lives in the ``users`` table; its roles are an element
collection kept in ``user_roles``.  ``created_at`` and ``updated_at``
are managed by the repository, ``deleted_at`` marks a soft-deleted
user and frees its username and email for reuse.
"""

import sqlite3
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterable, Optional, Set
from uuid import UUID


@dataclass
class User:
    username: str
    password_hash: str
    id: Optional[UUID] = None
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    avatar_url: Optional[str] = None
    enabled: bool = False
    email_verified: bool = False
    locked: bool = False
    last_login_at: Optional[datetime] = None
    roles: Set[str] = field(default_factory=set)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    @classmethod
    def from_row(cls, row: sqlite3.Row, roles: Iterable[str] = ()) -> "User":
        """Build a ``User`` from a ``users`` row and its role names."""
        return cls(
            id=UUID(row["id"]),
            username=row["username"],
            email=row["email"],
            password_hash=row["password_hash"],
            first_name=row["first_name"],
            last_name=row["last_name"],
            phone=row["phone"],
            avatar_url=row["avatar_url"],
            enabled=bool(row["enabled"]),
            email_verified=bool(row["email_verified"]),
            locked=bool(row["locked"]),
            last_login_at=_parse_timestamp(row["last_login_at"]),
            roles=set(roles),
            created_at=_parse_timestamp(row["created_at"]),
            updated_at=_parse_timestamp(row["updated_at"]),
            deleted_at=_parse_timestamp(row["deleted_at"]),
        )

    def to_row(self) -> Dict[str, Any]:
        """Return the ``users`` column values; roles are written separately."""
        return {
            "id": str(self.id) if self.id is not None else None,
            "username": self.username,
            "email": self.email,
            "password_hash": self.password_hash,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "phone": self.phone,
            "avatar_url": self.avatar_url,
            "enabled": int(self.enabled),
            "email_verified": int(self.email_verified),
            "locked": int(self.locked),
            "last_login_at": _format_timestamp(self.last_login_at),
            "created_at": _format_timestamp(self.created_at),
            "updated_at": _format_timestamp(self.updated_at),
            "deleted_at": _format_timestamp(self.deleted_at),
        }


def _parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    if value is None:
        return None
    return datetime.fromisoformat(value)


def _format_timestamp(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None
