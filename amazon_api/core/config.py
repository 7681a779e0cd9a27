"""
Simple configuration management.

Both services share one ``Settings`` dataclass whose defaults are read
directly from environment variables.  Each service only looks at the
fields it needs: the Orders service uses the ``orders_*`` values and
the Users service the ``users_*`` values, so the two can run against
separate database files and ports.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Amazon API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path to a log file.  When empty only the console handler
    # is installed.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Path to the SQLite database of each service.  Relative paths are
    # resolved against the project root by ``core.db``.
    orders_database_url: str = os.getenv("ORDERS_DATABASE_URL", "orders.db")
    users_database_url: str = os.getenv("USERS_DATABASE_URL", "users.db")

    orders_host: str = os.getenv("ORDERS_HOST", "0.0.0.0")
    orders_port: int = int(os.getenv("ORDERS_PORT", "8081"))
    users_host: str = os.getenv("USERS_HOST", "0.0.0.0")
    users_port: int = int(os.getenv("USERS_PORT", "8080"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()
