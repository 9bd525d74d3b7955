from __future__ import annotations

import json
import logging
import os
import tempfile
from collections.abc import Iterable
from datetime import date, timedelta
from pathlib import Path

from powerbot.core.models import PersistedState
from powerbot.core.serialization import state_from_payload, state_to_payload
from powerbot.storage.errors import StateLoadError, StateNotFoundError, StateSaveError


def retention_window(reference_dates: Iterable[date]) -> set[date]:
    window: set[date] = set()
    for day in reference_dates:
        window.add(day)
        window.add(day - timedelta(days=1))
    return window


def prune(state: PersistedState, reference_dates: Iterable[date]) -> PersistedState:
    """Keep only days equal to a reference date or the day before one."""
    window = retention_window(reference_dates)
    return PersistedState(days={day: record for day, record in state.days.items() if day in window})


class StateRepository:
    def __init__(self, state_path: str) -> None:
        self.state_path = state_path
        self._logger = logging.getLogger("powerbot.state")

    def load(self) -> PersistedState:
        path = Path(self.state_path)
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise StateNotFoundError(f"No state file at {path}") from exc
        except OSError as exc:
            raise StateLoadError(f"Could not read state file {path}: {exc}") from exc

        try:
            state = state_from_payload(json.loads(raw))
        except (ValueError, KeyError, TypeError) as exc:
            raise StateLoadError(f"Corrupt state file {path}: {exc}") from exc

        self._logger.debug("Loaded %d days from %s", len(state.days), path)
        return state

    def save(self, state: PersistedState) -> None:
        path = Path(self.state_path)
        document = json.dumps(state_to_payload(state), ensure_ascii=False, indent=2)

        tmp_name: str | None = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=path.parent,
                prefix=f".{path.name}.",
                suffix=".tmp",
                delete=False,
            ) as handle:
                tmp_name = handle.name
                handle.write(document)
                handle.write("\n")
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, path)
            tmp_name = None
        except OSError as exc:
            raise StateSaveError(f"Could not write state file {path}: {exc}") from exc
        finally:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)

        self._logger.debug("Saved %d days to %s", len(state.days), path)
