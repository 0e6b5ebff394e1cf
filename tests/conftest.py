import logging

import pytest
import structlog

from live_chat.config import get_settings


@pytest.fixture(autouse=True)
def _reset_global_state(monkeypatch: pytest.MonkeyPatch):
    for name in ("MONGODB_URI", "MONGODB_REQUIRED", "MONGODB_SERVER_SELECTION_TIMEOUT_MS", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    root_handlers = logging.root.handlers[:]
    root_level = logging.root.level
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()
    logging.root.handlers[:] = root_handlers
    logging.root.setLevel(root_level)
