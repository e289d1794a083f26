"""
Sport Tracker - Frame

One of the ten scoring slots of a bowling game.

Frame rules:
- Frames 1-9: a strike closes the frame after one roll, otherwise it closes
  after two rolls whose sum is at most 10
- Frame 10: a strike or a spare earns a third roll, otherwise it closes
  after two rolls
- In frame 10 the rack is reset to ten pins after every strike and after
  a spare, so each roll is only limited by the pins left on its own rack
"""

from dataclasses import dataclass, field
from typing import ClassVar

from sport_tracker.engine.base import FRAME_COUNT, PIN_COUNT, Roll
from sport_tracker.engine.errors import FrameClosed, IllegalFrameScore
from sport_tracker.engine.validators import validate_frame_index


@dataclass
class Frame:
    """
    A frame and the rolls recorded in it so far.

    Attributes:
        index: Frame number (1-10)
        rolls: Rolls in delivery order
    """
    index: int
    rolls: list[Roll] = field(default_factory=list)

    MAX_ROLLS: ClassVar[int] = 2
    MAX_ROLLS_LAST: ClassVar[int] = 3

    def __post_init__(self) -> None:
        """Validate the index and replay any given rolls through the rules."""
        validate_frame_index(self.index)
        given, self.rolls = list(self.rolls), []
        for roll in given:
            self.add_roll(roll)

    @property
    def is_last(self) -> bool:
        """True for the 10th frame."""
        return self.index == FRAME_COUNT

    @property
    def is_strike(self) -> bool:
        """True if the first roll knocked down all ten pins."""
        return bool(self.rolls) and self.rolls[0].is_strike

    @property
    def is_spare(self) -> bool:
        """True if the first two rolls cleared the rack without a strike."""
        return (
            not self.is_strike
            and len(self.rolls) >= 2
            and self.rolls[0].knocked_down_pins + self.rolls[1].knocked_down_pins == PIN_COUNT
        )

    @property
    def is_closed(self) -> bool:
        """True once the frame accepts no more rolls."""
        if not self.is_last:
            return self.is_strike or len(self.rolls) == self.MAX_ROLLS
        if len(self.rolls) == self.MAX_ROLLS_LAST:
            return True
        return len(self.rolls) == 2 and not (self.is_strike or self.is_spare)

    @property
    def is_open(self) -> bool:
        return not self.is_closed

    @property
    def pinfall(self) -> int:
        """Pins knocked down in this frame, without bonuses."""
        return sum(roll.knocked_down_pins for roll in self.rolls)

    def _rack(self) -> tuple[int, int]:
        """Return (pins standing, rolls thrown at the current rack)."""
        standing = PIN_COUNT
        thrown = 0
        for roll in self.rolls:
            standing -= roll.knocked_down_pins
            thrown += 1
            if standing == 0 and self.is_last:
                standing = PIN_COUNT
                thrown = 0
        return standing, thrown

    @property
    def pins_standing(self) -> int:
        """Pins available to the next roll of this frame."""
        return self._rack()[0]

    @property
    def rack_rolls(self) -> int:
        """Rolls already thrown at the rack currently set up."""
        return self._rack()[1]

    @property
    def can_strike(self) -> bool:
        """True if the next roll is the first one at a full rack."""
        return self.is_open and self.rack_rolls == 0

    @property
    def can_spare(self) -> bool:
        """True if the next roll could clear a rack already rolled at once."""
        return self.is_open and self.rack_rolls == 1

    def add_roll(self, roll: Roll | int) -> Roll:
        """
        Record a roll in this frame.

        The roll is fully validated before the frame is touched.

        Args:
            roll: A Roll or a plain pin count

        Returns:
            The recorded Roll

        Raises:
            FrameClosed: If the frame is already complete
            IllegalFrameScore: If the roll exceeds the pins standing
        """
        if not isinstance(roll, Roll):
            roll = Roll(knocked_down_pins=roll)

        if self.is_closed:
            raise FrameClosed(self.index)

        standing = self.pins_standing
        if roll.knocked_down_pins > standing:
            raise IllegalFrameScore(self.index, roll.knocked_down_pins, standing)

        self.rolls.append(roll)
        return roll

    def marks(self) -> list[str]:
        """Score-sheet symbols for the rolls: X, /, - or a digit."""
        symbols: list[str] = []
        standing = PIN_COUNT
        thrown = 0
        for roll in self.rolls:
            count = roll.knocked_down_pins
            if count == PIN_COUNT and thrown == 0:
                symbols.append("X")
            elif count == standing and thrown == 1:
                symbols.append("/")
            elif count == 0:
                symbols.append("-")
            else:
                symbols.append(str(count))
            standing -= count
            thrown += 1
            if standing == 0:
                standing = PIN_COUNT
                thrown = 0
        return symbols

    def to_dict(self) -> dict:
        """Convert to the persisted record shape."""
        return {
            "index": self.index,
            "rolls": [{"knocked_down_pins": roll.knocked_down_pins} for roll in self.rolls],
        }
