from __future__ import annotations


class StateLoadError(RuntimeError):
    pass


class StateNotFoundError(StateLoadError):
    pass


class StateSaveError(RuntimeError):
    pass
