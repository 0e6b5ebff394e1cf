"""Live chat application database bootstrap."""

__all__: list[str] = []
