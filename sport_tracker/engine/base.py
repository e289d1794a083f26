"""
Sport Tracker - Bowling Engine Base Classes

This module defines the value types shared by the scoring engine: the pin
rack, a single roll, and the series category. PinSet and Roll are frozen
dataclasses so a recorded delivery can never change after the fact.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from sport_tracker.engine.errors import InvalidPinSelection

PIN_COUNT = 10
FRAME_COUNT = 10
ALL_PINS: frozenset[int] = frozenset(range(1, PIN_COUNT + 1))

# Pin numbers by row, back row first, as they appear on the lane.
PIN_LAYOUT: tuple[tuple[int, ...], ...] = (
    (7, 8, 9, 10),
    (4, 5, 6),
    (2, 3),
    (1,),
)


class SeriesTag(Enum):
    """Category of a bowling series."""
    LEAGUE = "league"
    PRACTICE = "practice"
    TOURNAMENT = "tournament"


@dataclass(frozen=True)
class Roll:
    """
    A single delivery.

    Attributes:
        knocked_down_pins: Number of pins felled by this delivery (0-10)
    """
    knocked_down_pins: int

    def __post_init__(self) -> None:
        """Validate the pin count."""
        if isinstance(self.knocked_down_pins, bool) or not isinstance(self.knocked_down_pins, int):
            raise ValueError(
                f"Pin count must be an integer, got {type(self.knocked_down_pins).__name__}."
            )
        if not (0 <= self.knocked_down_pins <= PIN_COUNT):
            raise ValueError(
                f"Invalid pin count {self.knocked_down_pins}. "
                f"Must be between 0 and {PIN_COUNT}."
            )

    @property
    def is_strike(self) -> bool:
        """True if every pin fell."""
        return self.knocked_down_pins == PIN_COUNT

    @property
    def is_gutter(self) -> bool:
        return self.knocked_down_pins == 0

    @classmethod
    def strike(cls) -> "Roll":
        return cls(knocked_down_pins=PIN_COUNT)

    @classmethod
    def gutter(cls) -> "Roll":
        return cls(knocked_down_pins=0)


@dataclass(frozen=True)
class PinSet:
    """
    Immutable set of standing pins.

    Attributes:
        pins: Pin numbers (1-10) currently standing
    """
    pins: frozenset[int] = field(default_factory=lambda: ALL_PINS)

    def __post_init__(self) -> None:
        """Validate pin numbers are on the rack."""
        stray = frozenset(self.pins) - ALL_PINS
        if stray:
            raise InvalidPinSelection(stray)
        object.__setattr__(self, "pins", frozenset(self.pins))

    def __len__(self) -> int:
        return len(self.pins)

    def __contains__(self, pin: object) -> bool:
        return pin in self.pins

    def __iter__(self):
        return iter(sorted(self.pins))

    @classmethod
    def full(cls) -> "PinSet":
        """A full rack of ten standing pins."""
        return cls(pins=ALL_PINS)

    @classmethod
    def from_iterable(cls, pins: Iterable[int]) -> "PinSet":
        return cls(pins=frozenset(pins))

    @property
    def is_full(self) -> bool:
        return self.pins == ALL_PINS

    @property
    def knocked_down(self) -> frozenset[int]:
        """Pins not standing on this rack."""
        return ALL_PINS - self.pins

    def knock_down(self, pins: Iterable[int]) -> Roll:
        """
        Build the roll that knocks down the given pins.

        Args:
            pins: Pin numbers felled by the delivery; empty is a gutter ball

        Returns:
            Roll counting the felled pins

        Raises:
            InvalidPinSelection: If any pin is not standing on this rack
        """
        felled = frozenset(pins)
        not_standing = felled - self.pins
        if not_standing:
            raise InvalidPinSelection(not_standing)
        return Roll(knocked_down_pins=len(felled))

    def without(self, pins: Iterable[int]) -> "PinSet":
        """The rack left standing once the given pins fall."""
        felled = frozenset(pins)
        not_standing = felled - self.pins
        if not_standing:
            raise InvalidPinSelection(not_standing)
        return PinSet(pins=self.pins - felled)
