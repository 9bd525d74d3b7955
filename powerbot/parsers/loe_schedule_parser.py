from __future__ import annotations

import html
import logging
import re
from collections.abc import Sequence
from datetime import date, datetime

from powerbot.core.constants import (
    NO_OUTAGE_TEXT,
    POWER_PRESENT_MARKER,
    SECTION_DATE_FORMAT,
    TRACKED_GROUPS,
)
from powerbot.core.models import DayRecord, GroupRecord
from powerbot.parsers.errors import ParseError
from powerbot.parsers.scanner import find_fragment, find_section, scan_headers

_LEADING_DASHES = ("—", "–")
_SPACE_RUN_RE = re.compile(r" {2,}")


def normalize_fragment(fragment: str) -> str:
    text = html.unescape(fragment).strip()
    for dash in _LEADING_DASHES:
        if text.startswith(dash):
            text = text[len(dash) :].strip()
            break

    text = _SPACE_RUN_RE.sub(" ", text.replace("\u00a0", " ")).strip()
    if POWER_PRESENT_MARKER in text:
        return NO_OUTAGE_TEXT

    if text.endswith("."):
        text = text[:-1]
    return text


class LoeScheduleParser:
    def __init__(self, groups: Sequence[str] = TRACKED_GROUPS) -> None:
        self.groups = list(groups)
        self._logger = logging.getLogger("powerbot.parser")

    def parse(self, raw_content: str, target_dates: Sequence[date]) -> list[DayRecord]:
        if not isinstance(raw_content, str):
            raise ParseError(f"Content must be text, got {type(raw_content).__name__}")

        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug("Content preview (first 2000 chars):\n%s", raw_content[:2000])
            titles = [header.date_title for header in scan_headers(raw_content)]
            self._logger.debug("Found %d date headers: %s", len(titles), titles)

        records: list[DayRecord] = []
        for target in target_dates:
            record = self._parse_day(raw_content, self._as_date(target))
            if record is not None:
                records.append(record)
        return records

    def _as_date(self, target: object) -> date:
        if isinstance(target, datetime):
            return target.date()
        if isinstance(target, date):
            return target
        raise ParseError(f"Target date must be a date, got {type(target).__name__}")

    def _parse_day(self, raw_content: str, day: date) -> DayRecord | None:
        date_title = day.strftime(SECTION_DATE_FORMAT)
        section = find_section(raw_content, date_title)
        if section is None:
            self._logger.debug("No section found for %s", date_title)
            return None
        self._logger.debug("Found section for %s (first 500 chars):\n%s", date_title, section[:500])

        groups: dict[str, GroupRecord] = {}
        for group in self.groups:
            fragment = find_fragment(section, group)
            text = normalize_fragment(fragment) if fragment is not None else ""
            if not text:
                self._logger.debug("Group %s not found in section %s", group, date_title)
                continue
            self._logger.debug("Found group %s: %r", group, text)
            groups[group] = GroupRecord.from_text(text)

        if not groups:
            return None
        return DayRecord(date=day, groups=groups)
