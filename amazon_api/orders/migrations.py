"""
Schema migrations for the Orders database.

Append new migrations with an incremented version number; never edit
one that has already shipped.
"""

from typing import List

from amazon_api.core.db import Migration

MIGRATIONS: List[Migration] = [
    # Migration 1: initial schema
    (
        1,
        """
        -- ``id`` is a UUID in canonical text form.  ``total_amount`` is
        -- TEXT rather than REAL so that decimal amounts are stored exactly.
        CREATE TABLE IF NOT EXISTS orders (
            id TEXT PRIMARY KEY,
            customer_email TEXT,
            description TEXT,
            total_amount TEXT,
            status TEXT NOT NULL DEFAULT 'PENDING',
            created_at TIMESTAMP NOT NULL,
            updated_at TIMESTAMP NOT NULL
        );
        """,
    ),
]
