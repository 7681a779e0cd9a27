"""
Schema migrations for the Users database.
"""

from typing import List

from amazon_api.core.db import Migration

MIGRATIONS: List[Migration] = [
    # Migration 1: initial schema
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS users (
            id TEXT PRIMARY KEY,
            username VARCHAR(128) NOT NULL,
            email TEXT,
            password_hash VARCHAR(255) NOT NULL,
            first_name TEXT,
            last_name TEXT,
            phone TEXT,
            avatar_url TEXT,
            enabled INTEGER NOT NULL DEFAULT 0,
            email_verified INTEGER NOT NULL DEFAULT 0,
            locked INTEGER NOT NULL DEFAULT 0,
            last_login_at TIMESTAMP,
            created_at TIMESTAMP NOT NULL,
            updated_at TIMESTAMP NOT NULL,
            deleted_at TIMESTAMP
        );

        -- Usernames and emails are unique among users that are not
        -- soft-deleted.
        CREATE UNIQUE INDEX IF NOT EXISTS idx_users_username
            ON users(username) WHERE deleted_at IS NULL;
        CREATE UNIQUE INDEX IF NOT EXISTS idx_users_email
            ON users(email) WHERE deleted_at IS NULL;

        CREATE TABLE IF NOT EXISTS user_roles (
            user_id TEXT NOT NULL,
            role TEXT NOT NULL,
            PRIMARY KEY (user_id, role),
            FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
        );
        """,
    ),
]
