from __future__ import annotations

from collections.abc import Sequence
from datetime import date
from typing import Protocol

from powerbot.core.models import DayRecord


class ScheduleParser(Protocol):
    def parse(self, raw_content: str, target_dates: Sequence[date]) -> list[DayRecord]:
        """Extract per-day records for the tracked groups; missing days are skipped."""
