"""Startup routine that opens the chat database connection."""

from __future__ import annotations

import sys
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import structlog
from pymongo import AsyncMongoClient

from live_chat.config import Settings, get_settings
from live_chat.database.connection import Database, build_connection_target, mask_uri

logger = structlog.get_logger(__name__)


@dataclass(slots=True)
class ConnectionResult:
    """Outcome of a single bootstrap attempt."""

    target: str
    database: Database | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.database is not None


def _failure_logger() -> Any:
    # Unconfigured structlog prints to stdout; failures belong on stderr.
    if structlog.is_configured():
        return logger
    return structlog.wrap_logger(structlog.PrintLogger(sys.stderr))


def _log_connected(database: Database) -> None:
    logger.info("MongoDB connected successfully", database=database.db.name, target=mask_uri(database.uri))


async def connect_db(
    settings: Settings | None = None,
    *,
    client_factory: Callable[..., Any] = AsyncMongoClient,
) -> ConnectionResult:
    """Connect to MongoDB once, logging the outcome instead of raising.

    Failures are reported through the returned ``ConnectionResult`` so the
    caller decides whether a missing database is fatal.
    """

    settings = settings or get_settings()
    target = settings.mongodb_uri

    try:
        target = build_connection_target(settings.mongodb_uri)
        database = Database(
            target,
            server_selection_timeout_ms=settings.mongodb_server_selection_timeout_ms,
            client_factory=client_factory,
        )
        database.on("connected", _log_connected)
        await database.connect()
    except Exception as exc:  # noqa: BLE001
        _failure_logger().error("Error connecting to MongoDB", target=mask_uri(target), error=str(exc))
        return ConnectionResult(target=target, error=exc)

    return ConnectionResult(target=target, database=database)
