"""Database package exports."""

from live_chat.database.bootstrap import ConnectionResult, connect_db
from live_chat.database.connection import (
    DATABASE_NAME,
    Database,
    DatabaseConnectionError,
    build_connection_target,
)

__all__ = [
    "DATABASE_NAME",
    "ConnectionResult",
    "Database",
    "DatabaseConnectionError",
    "build_connection_target",
    "connect_db",
]
