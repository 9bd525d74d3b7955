from __future__ import annotations

import logging
from enum import Enum

from powerbot.core.models import DayComparison, DayRecord
from powerbot.notifiers.base import DeliveryError, Notifier
from powerbot.notifiers.formatter import format_message


class DeliveryOutcome(str, Enum):
    SENT = "sent"
    FAILED = "failed"
    SKIPPED = "skipped"


class Dispatcher:
    """Best-effort delivery: failures are logged and reported, never raised."""

    def __init__(self, notifier: Notifier | None, chat_id: str | None) -> None:
        self.notifier = notifier
        self.chat_id = chat_id
        self._logger = logging.getLogger("powerbot.notify")

    @property
    def enabled(self) -> bool:
        return self.notifier is not None and bool(self.chat_id)

    async def announce(self, day: DayRecord, comparison: DayComparison) -> DeliveryOutcome:
        if not self.enabled:
            self._logger.info("Notifier not configured, skipping post for %s", day.date)
            return DeliveryOutcome.SKIPPED

        message = format_message(day, is_update=comparison.changed, worsened=comparison.worsened)
        try:
            await self.notifier.send(self.chat_id, message)
        except DeliveryError as exc:
            self._logger.error("Post for %s failed: %s", day.date, exc)
            return DeliveryOutcome.FAILED

        self._logger.info("Posted %s for %s", "update" if comparison.changed else "schedule", day.date)
        return DeliveryOutcome.SENT
