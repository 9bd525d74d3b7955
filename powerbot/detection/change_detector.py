from __future__ import annotations

from collections.abc import Sequence

from powerbot.core.constants import TRACKED_GROUPS
from powerbot.core.models import ChangeKind, DayComparison, DayRecord


def compare(
    previous: DayRecord | None,
    current: DayRecord,
    groups: Sequence[str] = TRACKED_GROUPS,
) -> DayComparison:
    """Classify ``current`` against the stored record for the same date.

    A group contributes to a change when it appears or disappears, or when
    its text differs. The day is worsened when any contributing group now
    has a longer outage than before; a missing group counts as 0 minutes.
    """
    if previous is None:
        return DayComparison(kind=ChangeKind.UNSEEN)

    changed = False
    worsened = False
    for group in groups:
        old = previous.groups.get(group)
        new = current.groups.get(group)
        if old is None and new is None:
            continue
        if old is not None and new is not None and old.text == new.text:
            continue

        changed = True
        old_minutes = old.minutes if old is not None else 0
        new_minutes = new.minutes if new is not None else 0
        if new_minutes > old_minutes:
            worsened = True

    if not changed:
        return DayComparison(kind=ChangeKind.UNCHANGED)
    return DayComparison(kind=ChangeKind.CHANGED, worsened=worsened)
