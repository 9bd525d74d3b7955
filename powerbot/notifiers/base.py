from __future__ import annotations

from typing import Protocol


class DeliveryError(RuntimeError):
    pass


class Notifier(Protocol):
    async def send(self, chat_id: str, text: str) -> None:
        """Deliver ``text`` to ``chat_id``; raise ``DeliveryError`` on failure."""
