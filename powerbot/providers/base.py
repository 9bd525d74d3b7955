from __future__ import annotations

from typing import Protocol

from powerbot.core.models import FetchResult


class ScheduleContentProvider(Protocol):
    async def fetch_latest(self) -> FetchResult:
        """Fetch the raw schedule hypertext."""
