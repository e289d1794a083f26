"""
Sport Tracker View Models.

Framework-free controllers between the engine, persistence and the UI.
"""

from sport_tracker.viewmodels.events import EntryEvent, EventPayload, Toast, ToastType
from sport_tracker.viewmodels.game_entry import EntrySnapshot, GameEntryViewModel
from sport_tracker.viewmodels.series_list import SeriesContentState, SeriesListViewModel

__all__ = [
    "EntryEvent",
    "EntrySnapshot",
    "EventPayload",
    "GameEntryViewModel",
    "SeriesContentState",
    "SeriesListViewModel",
    "Toast",
    "ToastType",
]
