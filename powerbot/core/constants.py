from __future__ import annotations

from typing import Final

GROUP_POWER: Final[str] = "Група 6.1"
GROUP_WATER: Final[str] = "Група 4.1"

# Message line order follows this list.
TRACKED_GROUPS: Final[list[str]] = [GROUP_POWER, GROUP_WATER]

GROUP_LABELS: Final[dict[str, str]] = {
    GROUP_POWER: "*💡 світла не буде*",
    GROUP_WATER: "*💧 води не буде*",
}

SECTION_HEADER: Final[str] = "Графік погодинних відключень на"

POWER_PRESENT_MARKER: Final[str] = "Електроенергія є"
NO_OUTAGE_TEXT: Final[str] = "буде!!!!"
NO_DATA_TEXT: Final[str] = "н/д"

TITLE_SCHEDULE: Final[str] = "графік на {day}"
TITLE_UPDATE_WORSE: Final[str] = "upd. 😩 на {day}"
TITLE_UPDATE_BETTER: Final[str] = "upd. 🍾 на {day}"

SECTION_DATE_FORMAT: Final[str] = "%d.%m.%Y"
TITLE_DATE_FORMAT: Final[str] = "%d.%m"

MINUTES_PER_DAY: Final[int] = 24 * 60
