"""Application entrypoint for the live chat database bootstrap."""

import asyncio
import signal

import structlog

from live_chat.config import get_settings
from live_chat.database import connect_db
from live_chat.utils.logger import setup_logging

logger = structlog.get_logger(__name__)


def _install_stop_handlers(stop: asyncio.Event) -> None:
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, stop.set)
        except NotImplementedError:
            # Windows event loops have no signal handler support.
            signal.signal(sig, lambda *_: loop.call_soon_threadsafe(stop.set))


async def main(stop: asyncio.Event | None = None) -> int:
    """Connect to MongoDB, then stay up until asked to stop."""

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format, settings.log_file_path)

    result = await connect_db(settings)
    if not result.ok and settings.mongodb_required:
        logger.error("MongoDB is required, shutting down")
        return 1

    if stop is None:
        stop = asyncio.Event()
        _install_stop_handlers(stop)

    try:
        await stop.wait()
    finally:
        if result.database is not None:
            await result.database.disconnect()
    return 0


def run() -> None:
    raise SystemExit(asyncio.run(main()))


if __name__ == "__main__":
    run()
