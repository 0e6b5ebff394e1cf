"""Example: open the chat database with an explicit handle and react to its events."""

import asyncio

from live_chat.database import Database, DatabaseConnectionError, build_connection_target


async def main() -> None:
    database = Database(build_connection_target("mongodb://127.0.0.1:27017"), server_selection_timeout_ms=2000)
    database.on("connected", lambda db: print(f"connected to {db.db.name}"))
    database.on("disconnected", lambda db: print("disconnected"))

    try:
        await database.connect()
    except DatabaseConnectionError as exc:
        print(f"connection failed: {exc}")
        return

    print(f"healthy: {await database.ping()}")
    await database.disconnect()


if __name__ == "__main__":
    asyncio.run(main())
