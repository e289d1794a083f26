"""
Sport Tracker - Game

Ten frames filled in order, with the running score derived on demand.

Scoring rules:
- Open frame: pins knocked down in the frame
- Spare (frames 1-9): 10 plus the next roll
- Strike (frames 1-9): 10 plus the next two rolls
- Frame 10: pins knocked down in the frame, its bonus rolls count once
"""

from __future__ import annotations

from dataclasses import dataclass, field

from sport_tracker.engine.base import FRAME_COUNT, PIN_COUNT, Roll
from sport_tracker.engine.errors import GameComplete
from sport_tracker.engine.frame import Frame


def _empty_frames() -> list[Frame]:
    return [Frame(index=i) for i in range(1, FRAME_COUNT + 1)]


@dataclass
class Game:
    """
    A bowling game.

    Attributes:
        frames: Exactly ten frames, index 1-10
    """
    frames: list[Frame] = field(default_factory=_empty_frames)

    def __post_init__(self) -> None:
        """Validate the frame slots and their order of play."""
        if len(self.frames) != FRAME_COUNT:
            raise ValueError(f"A game has exactly {FRAME_COUNT} frames, got {len(self.frames)}.")
        for position, frame in enumerate(self.frames, start=1):
            if frame.index != position:
                raise ValueError(f"Frame at position {position} has index {frame.index}.")
        for earlier, later in zip(self.frames, self.frames[1:]):
            if later.rolls and earlier.is_open:
                raise ValueError(
                    f"Frame {later.index} has rolls before frame {earlier.index} is complete."
                )

    @property
    def current_frame(self) -> Frame | None:
        """The first frame still accepting rolls, or None once complete."""
        for frame in self.frames:
            if frame.is_open:
                return frame
        return None

    @property
    def is_complete(self) -> bool:
        """True once the 10th frame is closed."""
        return self.frames[-1].is_closed

    @property
    def rolls(self) -> list[Roll]:
        """Every roll of the game in delivery order."""
        return [roll for frame in self.frames for roll in frame.rolls]

    def append_roll(self, roll: Roll | int) -> Frame:
        """
        Record the next roll of the game.

        Args:
            roll: A Roll or a plain pin count

        Returns:
            The frame the roll was recorded in

        Raises:
            GameComplete: If every frame is already closed
            IllegalFrameScore: If the roll exceeds the pins standing
        """
        frame = self.current_frame
        if frame is None:
            raise GameComplete()
        frame.add_roll(roll)
        return frame

    def _rolls_after(self, frame_index: int) -> list[int]:
        """Pin counts of every roll thrown after the given frame."""
        return [
            roll.knocked_down_pins
            for frame in self.frames[frame_index:]
            for roll in frame.rolls
        ]

    def frame_score(self, index: int) -> int | None:
        """
        Points earned by a single frame, bonuses included.

        Args:
            index: Frame number (1-10)

        Returns:
            The frame's points, or None while the frame or its bonus rolls
            are still to be thrown
        """
        frame = self.frames[index - 1]
        if frame.is_open:
            return None
        if frame.is_last:
            return frame.pinfall

        if frame.is_strike:
            bonus_count = 2
        elif frame.is_spare:
            bonus_count = 1
        else:
            return frame.pinfall

        bonus = self._rolls_after(index)[:bonus_count]
        if len(bonus) < bonus_count:
            return None
        return PIN_COUNT + sum(bonus)

    def score(self) -> list[int | None]:
        """
        Cumulative score after each frame.

        Frames that cannot be resolved yet, and every frame after the first
        such one, report None.
        """
        totals: list[int | None] = []
        running = 0
        resolved = True
        for frame in self.frames:
            points = self.frame_score(frame.index) if resolved else None
            if points is None:
                resolved = False
                totals.append(None)
                continue
            running += points
            totals.append(running)
        return totals

    @property
    def total_score(self) -> int:
        """Sum of the resolved frames. Exact once the game is complete."""
        resolved = [total for total in self.score() if total is not None]
        return resolved[-1] if resolved else 0

    def max_possible_score(self) -> int:
        """Best total still reachable if every remaining roll clears its rack."""
        best = Game.from_dict(self.to_dict())
        while not best.is_complete:
            best.append_roll(best.current_frame.pins_standing)
        return best.total_score

    def to_dict(self) -> dict:
        """Convert to the persisted record shape."""
        return {"frames": [frame.to_dict() for frame in self.frames]}

    @classmethod
    def from_dict(cls, data: dict) -> Game:
        """
        Rebuild a game from its record by replaying every roll.

        Raises:
            ValueError: If a roll does not belong to the frame it is stored
                in, or breaks the scoring rules
        """
        game = cls()
        records = sorted(data.get("frames", []), key=lambda f: f["index"])
        for record in records:
            for roll in record.get("rolls", []):
                frame = game.current_frame
                if frame is None or frame.index != record["index"]:
                    raise ValueError(
                        f"Roll stored in frame {record['index']} belongs to "
                        f"frame {frame.index if frame else 'none'}."
                    )
                game.append_roll(Roll(knocked_down_pins=roll["knocked_down_pins"]))
        return game
