from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from powerbot.core.durations import outage_minutes


class ChangeKind(str, Enum):
    UNSEEN = "unseen"
    UNCHANGED = "unchanged"
    CHANGED = "changed"


@dataclass(frozen=True)
class GroupRecord:
    text: str
    minutes: int

    @classmethod
    def from_text(cls, text: str) -> GroupRecord:
        """Build a record whose duration is derived from the outage window in ``text``."""
        return cls(text=text, minutes=outage_minutes(text))


@dataclass(frozen=True)
class DayRecord:
    date: date
    groups: dict[str, GroupRecord]


@dataclass
class PersistedState:
    days: dict[date, DayRecord] = field(default_factory=dict)

    def find(self, day: date) -> DayRecord | None:
        return self.days.get(day)

    def upsert(self, record: DayRecord) -> None:
        self.days[record.date] = record

    def dates(self) -> list[date]:
        return sorted(self.days)


@dataclass(frozen=True)
class DayComparison:
    kind: ChangeKind
    worsened: bool = False

    @property
    def changed(self) -> bool:
        return self.kind is ChangeKind.CHANGED

    @property
    def should_announce(self) -> bool:
        return self.kind is not ChangeKind.UNCHANGED


@dataclass(frozen=True)
class FetchResult:
    raw_content: str
    source: str
