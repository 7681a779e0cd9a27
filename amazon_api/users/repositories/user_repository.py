"""
Storage interface for users and its SQLite implementation.

The repository owns the system-managed timestamps: ``created_at`` is
set on the first save and ``updated_at`` on every save.  Roles are
rewritten as a whole on each save.  Violating the username or email
uniqueness raises ``sqlite3.IntegrityError`` to the caller.
"""

from __future__ import annotations

import logging
import sqlite3
from abc import ABC, abstractmethod
from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional, Set
from uuid import UUID, uuid4

from fastapi.concurrency import run_in_threadpool

from amazon_api.core.db import get_cursor
from amazon_api.users.models import User

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UserRepository(ABC):
    """Persistence operations over ``User`` entities."""

    @abstractmethod
    async def find_all(self) -> List[User]:
        """Return every stored user, soft-deleted ones included."""

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Return the user with ``user_id`` or ``None``."""

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert or update ``user`` and return the stored state."""

    @abstractmethod
    async def delete_by_id(self, user_id: UUID) -> None:
        """Remove the user row and its roles; a missing id is a no-op."""

    @abstractmethod
    async def exists_by_id(self, user_id: UUID) -> bool:
        """Return ``True`` if a user with ``user_id`` is stored."""


class SQLiteUserRepository(UserRepository):
    """``UserRepository`` backed by a SQLite database file."""

    def __init__(self, db_path: str, clock: Callable[[], datetime] = utcnow) -> None:
        self.db_path = db_path
        self.clock = clock

    async def find_all(self) -> List[User]:
        return await run_in_threadpool(self._find_all)

    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        return await run_in_threadpool(self._find_by_id, user_id)

    async def save(self, user: User) -> User:
        return await run_in_threadpool(self._save, user)

    async def delete_by_id(self, user_id: UUID) -> None:
        await run_in_threadpool(self._delete_by_id, user_id)

    async def exists_by_id(self, user_id: UUID) -> bool:
        return await run_in_threadpool(self._exists_by_id, user_id)

    def _find_all(self) -> List[User]:
        with get_cursor(self.db_path) as cursor:
            rows = cursor.execute("SELECT * FROM users ORDER BY rowid").fetchall()
            roles = self._load_roles(cursor)
        return [User.from_row(row, roles.get(row["id"], ())) for row in rows]

    def _find_by_id(self, user_id: UUID) -> Optional[User]:
        with get_cursor(self.db_path) as cursor:
            row = cursor.execute(
                "SELECT * FROM users WHERE id = ?", (str(user_id),)
            ).fetchone()
            if not row:
                return None
            roles = self._load_roles(cursor, row["id"])
        return User.from_row(row, roles.get(row["id"], ()))

    def _save(self, user: User) -> User:
        now = self.clock()
        user = replace(
            user,
            id=user.id or uuid4(),
            created_at=user.created_at or now,
            updated_at=now,
        )
        values = user.to_row()
        columns = list(values)
        updates = ", ".join(f"{col} = excluded.{col}" for col in columns if col != "id")
        with get_cursor(self.db_path) as cursor:
            cursor.execute(
                f"INSERT INTO users ({', '.join(columns)}) "
                f"VALUES ({', '.join(':' + col for col in columns)}) "
                f"ON CONFLICT(id) DO UPDATE SET {updates}",
                values,
            )
            cursor.execute("DELETE FROM user_roles WHERE user_id = ?", (values["id"],))
            cursor.executemany(
                "INSERT INTO user_roles (user_id, role) VALUES (?, ?)",
                [(values["id"], role) for role in sorted(user.roles)],
            )
            row = cursor.execute(
                "SELECT * FROM users WHERE id = ?", (values["id"],)
            ).fetchone()
            roles = self._load_roles(cursor, values["id"])
        logger.debug("Saved user %s", values["id"])
        return User.from_row(row, roles.get(values["id"], ()))

    def _delete_by_id(self, user_id: UUID) -> None:
        with get_cursor(self.db_path) as cursor:
            cursor.execute("DELETE FROM users WHERE id = ?", (str(user_id),))

    def _exists_by_id(self, user_id: UUID) -> bool:
        with get_cursor(self.db_path) as cursor:
            row = cursor.execute(
                "SELECT 1 FROM users WHERE id = ?", (str(user_id),)
            ).fetchone()
        return row is not None

    @staticmethod
    def _load_roles(cursor: sqlite3.Cursor, user_id: Optional[str] = None) -> Dict[str, Set[str]]:
        """Return role names grouped by user id (all users if ``user_id`` is None)."""
        if user_id is None:
            rows = cursor.execute("SELECT user_id, role FROM user_roles").fetchall()
        else:
            rows = cursor.execute(
                "SELECT user_id, role FROM user_roles WHERE user_id = ?", (user_id,)
            ).fetchall()
        roles: Dict[str, Set[str]] = {}
        for row in rows:
            roles.setdefault(row["user_id"], set()).add(row["role"])
        return roles
