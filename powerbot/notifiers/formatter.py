from __future__ import annotations

from powerbot.core.constants import (
    GROUP_LABELS,
    NO_DATA_TEXT,
    TITLE_DATE_FORMAT,
    TITLE_SCHEDULE,
    TITLE_UPDATE_BETTER,
    TITLE_UPDATE_WORSE,
    TRACKED_GROUPS,
)
from powerbot.core.models import DayRecord


def format_title(day: DayRecord, *, is_update: bool, worsened: bool) -> str:
    day_title = day.date.strftime(TITLE_DATE_FORMAT)
    if not is_update:
        return TITLE_SCHEDULE.format(day=day_title)
    if worsened:
        return TITLE_UPDATE_WORSE.format(day=day_title)
    return TITLE_UPDATE_BETTER.format(day=day_title)


def format_group_line(day: DayRecord, group: str) -> str:
    record = day.groups.get(group)
    text = record.text if record is not None else NO_DATA_TEXT
    return f"{GROUP_LABELS[group]}: {text}"


def format_message(day: DayRecord, is_update: bool, worsened: bool) -> str:
    lines = [f"*{format_title(day, is_update=is_update, worsened=worsened)}*"]
    lines.extend(format_group_line(day, group) for group in TRACKED_GROUPS)
    return "\n".join(lines)
