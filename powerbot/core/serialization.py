from __future__ import annotations

from datetime import date
from typing import Any

from powerbot.core.constants import TRACKED_GROUPS
from powerbot.core.models import DayRecord, GroupRecord, PersistedState


def _ordered_groups(groups: dict[str, GroupRecord]) -> list[str]:
    tracked = [group for group in TRACKED_GROUPS if group in groups]
    return tracked + sorted(group for group in groups if group not in TRACKED_GROUPS)


def day_to_payload(day: DayRecord) -> dict[str, Any]:
    return {
        "date": day.date.isoformat(),
        "groups": {
            group: {"text": day.groups[group].text, "minutes": day.groups[group].minutes}
            for group in _ordered_groups(day.groups)
        },
    }


def state_to_payload(state: PersistedState) -> dict[str, Any]:
    return {"days": [day_to_payload(state.days[day]) for day in state.dates()]}


def day_from_payload(raw: Any) -> DayRecord:
    if not isinstance(raw, dict):
        raise ValueError(f"Day entry must be an object, got {type(raw).__name__}")

    day = date.fromisoformat(str(raw["date"]))
    raw_groups = raw.get("groups") or {}
    if not isinstance(raw_groups, dict):
        raise ValueError(f"Groups for {day} must be an object")

    groups: dict[str, GroupRecord] = {}
    for group, value in raw_groups.items():
        if not isinstance(value, dict):
            raise ValueError(f"Group {group!r} for {day} must be an object")
        groups[str(group)] = GroupRecord(text=str(value["text"]), minutes=int(value["minutes"]))

    return DayRecord(date=day, groups=groups)


def state_from_payload(payload: Any) -> PersistedState:
    """Decode the state document. Raises ``ValueError``/``KeyError`` on a malformed shape."""
    if not isinstance(payload, dict):
        raise ValueError(f"State document must be an object, got {type(payload).__name__}")

    raw_days = payload.get("days")
    if raw_days is None:
        raw_days = []
    if not isinstance(raw_days, list):
        raise ValueError("State field 'days' must be a list")

    state = PersistedState()
    for raw in raw_days:
        state.upsert(day_from_payload(raw))
    return state
