"""MongoDB client handle and connection target helpers."""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

import structlog
from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError

DATABASE_NAME = "live-chat-app"
EVENTS = ("connected", "disconnected", "error")

_CREDENTIALS_RE = re.compile(r"(://[^:/@]+:)[^@/]+@")


class DatabaseConnectionError(Exception):
    """Raised when the MongoDB connection cannot be established."""


def build_connection_target(base_uri: str) -> str:
    """Append the chat database name to the configured base URI."""

    if not base_uri:
        raise ValueError("MongoDB base URI is empty")
    return f"{base_uri}/{DATABASE_NAME}"


def mask_uri(uri: str) -> str:
    """Hide the password part of a connection URI for logging."""

    return _CREDENTIALS_RE.sub(r"\1***@", uri)


class Database:
    """Owned MongoDB client handle with connection event listeners."""

    def __init__(
        self,
        uri: str,
        server_selection_timeout_ms: int = 30000,
        client_factory: Callable[..., Any] = AsyncMongoClient,
    ) -> None:
        self._uri = uri
        self._server_selection_timeout_ms = server_selection_timeout_ms
        self._client_factory = client_factory
        self._client: Any | None = None
        self._db: Any | None = None
        self._listeners: dict[str, list[Callable[..., Any]]] = {event: [] for event in EVENTS}
        self._logger = structlog.get_logger(__name__).bind(target=mask_uri(uri))

    @property
    def uri(self) -> str:
        return self._uri

    @property
    def client(self) -> Any:
        if self._client is None:
            raise RuntimeError("Database client is not initialized")
        return self._client

    @property
    def db(self) -> Any:
        if self._db is None:
            raise RuntimeError("Database client is not initialized")
        return self._db

    @property
    def is_connected(self) -> bool:
        return self._db is not None

    def on(self, event: str, callback: Callable[..., Any]) -> None:
        """Register a listener for ``connected``, ``disconnected`` or ``error``."""

        if event not in self._listeners:
            raise ValueError(f"Unsupported database event: {event}")
        self._listeners[event].append(callback)

    def _emit(self, event: str, *args: Any) -> None:
        for callback in self._listeners[event]:
            callback(self, *args)

    async def connect(self) -> None:
        """Open the client and wait until the server answers a ping.

        Calling it on a connected handle does nothing.
        """

        if self.is_connected:
            return

        client = None
        try:
            client = self._client_factory(self._uri, serverSelectionTimeoutMS=self._server_selection_timeout_ms)
            await client.admin.command("ping")
            db = client.get_default_database()
        except (PyMongoError, ValueError) as exc:
            if client is not None:
                await client.close()
            error = DatabaseConnectionError(f"Failed to connect to MongoDB: {exc}")
            self._emit("error", error)
            raise error from exc

        self._client = client
        self._db = db
        self._logger.debug("MongoDB client ready", database=db.name)
        try:
            self._emit("connected")
        except Exception:
            self._client = None
            self._db = None
            await client.close()
            raise

    async def ping(self) -> bool:
        """Return True when the server answers, False on driver errors."""

        try:
            await self.client.admin.command("ping")
        except PyMongoError as exc:
            self._logger.warning("MongoDB ping failed", error=str(exc))
            return False
        return True

    async def disconnect(self) -> None:
        if self._client is None:
            return
        await self._client.close()
        self._client = None
        self._db = None
        self._emit("disconnected")
