from __future__ import annotations

from .controller import SleepWakeController
from .debounce import SLEEP, WAKE, TransitionDebounce
from .interfaces import SavedInterfaceState

__all__ = [
    "SLEEP",
    "WAKE",
    "SavedInterfaceState",
    "SleepWakeController",
    "TransitionDebounce",
]
