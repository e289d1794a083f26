"""
Sport Tracker - View Model Event Definitions

Event types, payloads and toast notices published by the view models to
whatever host renders them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable

logger = logging.getLogger(__name__)


class EntryEvent(Enum):
    """Events that can occur while entering a game."""

    SELECTION_CHANGED = auto()
    ROLL_ADDED = auto()
    STRIKE = auto()
    SPARE = auto()
    FRAME_CLOSED = auto()
    GAME_COMPLETED = auto()
    GAME_SAVED = auto()
    GAME_RESET = auto()
    VALIDATION_FAILED = auto()
    SERIES_LOADED = auto()
    SERIES_SAVED = auto()
    SERIES_DELETED = auto()
    REQUEST_FAILED = auto()


class ToastType(Enum):
    """Severity of a toast notice."""

    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Toast:
    """A transient notice for the user."""

    type: ToastType
    message: str

    @classmethod
    def success(cls, message: str) -> Toast:
        return cls(ToastType.SUCCESS, message)

    @classmethod
    def error(cls, message: str) -> Toast:
        return cls(ToastType.ERROR, message)

    @classmethod
    def warning(cls, message: str) -> Toast:
        return cls(ToastType.WARNING, message)


@dataclass
class EventPayload:
    """Wrapper for view model event data."""

    event: EntryEvent
    snapshot: Any = None
    toast: Toast | None = None
    data: dict[str, Any] = field(default_factory=dict)


class Observable:
    """Explicit observer registration shared by the view models."""

    def __init__(self) -> None:
        self._observers: list[Callable[[EventPayload], None]] = []

    def subscribe(self, on_event: Callable[[EventPayload], None]) -> Callable[[], None]:
        """Register a callback and return a function that removes it."""
        self._observers.append(on_event)

        def unsubscribe() -> None:
            if on_event in self._observers:
                self._observers.remove(on_event)

        return unsubscribe

    def _notify(self, payload: EventPayload) -> None:
        for on_event in list(self._observers):
            try:
                on_event(payload)
            except Exception:
                logger.exception("Observer failed handling %s", payload.event.name)
