"""
Sport Tracker - Bowling Engine Errors

Every rejection the engine can produce. All of them subclass ValueError so
callers that only care about "bad input" can catch that, and none of them
leave a Frame or Game partially updated.
"""


class BowlingError(ValueError):
    """Base class for scoring and pin-selection errors."""


class InvalidPinSelection(BowlingError):
    """A selection references a pin that is not currently standing."""

    def __init__(self, pins: frozenset[int]) -> None:
        self.pins = pins
        listed = ", ".join(str(p) for p in sorted(pins))
        super().__init__(f"Pin(s) {listed} are not standing.")


class IllegalFrameScore(BowlingError):
    """A roll would knock down more pins than are standing in the frame."""

    def __init__(self, frame_index: int, knocked_down: int, standing: int) -> None:
        self.frame_index = frame_index
        self.knocked_down = knocked_down
        self.standing = standing
        super().__init__(
            f"Frame {frame_index}: cannot knock down {knocked_down} pins, "
            f"only {standing} standing."
        )


class FrameClosed(BowlingError):
    """A roll was added to a frame that is already complete."""

    def __init__(self, frame_index: int) -> None:
        self.frame_index = frame_index
        super().__init__(f"Frame {frame_index} is already complete.")


class GameComplete(BowlingError):
    """A roll was appended to a game whose 10th frame is closed."""

    def __init__(self) -> None:
        super().__init__("The game is already complete.")
