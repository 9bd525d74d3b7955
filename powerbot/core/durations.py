from __future__ import annotations

import re

from powerbot.core.constants import MINUTES_PER_DAY

# "Електроенергії немає з 14:00 до 16:30"
_WINDOW_RE = re.compile(r"з\s+(\d{2}):(\d{2})\s+до\s+(\d{2}):(\d{2})")


def _clock_minutes(hours: str, minutes: str) -> int | None:
    h, m = int(hours), int(minutes)
    if h == 24 and m == 0:
        return MINUTES_PER_DAY
    if h > 23 or m > 59:
        return None
    return h * 60 + m


def outage_minutes(text: str) -> int:
    """Length of the first outage window found in ``text``, 0 when there is none.

    An end time earlier than the start time wraps into the next day.
    """
    match = _WINDOW_RE.search(text)
    if match is None:
        return 0

    start = _clock_minutes(match.group(1), match.group(2))
    end = _clock_minutes(match.group(3), match.group(4))
    if start is None or end is None:
        return 0

    if end < start:
        end += MINUTES_PER_DAY
    return end - start
