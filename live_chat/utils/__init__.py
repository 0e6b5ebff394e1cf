"""Utils package exports."""

from live_chat.utils.logger import setup_logging

__all__ = ["setup_logging"]
