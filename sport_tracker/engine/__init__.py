"""
Sport Tracker Bowling Engine.

Pure Python scoring logic with zero UI/database dependencies.
Handles pin racks, frame completion, strike/spare bonuses and series.
"""

from sport_tracker.engine.base import (
    ALL_PINS,
    FRAME_COUNT,
    PIN_COUNT,
    PIN_LAYOUT,
    PinSet,
    Roll,
    SeriesTag,
)
from sport_tracker.engine.errors import (
    BowlingError,
    FrameClosed,
    GameComplete,
    IllegalFrameScore,
    InvalidPinSelection,
)
from sport_tracker.engine.frame import Frame
from sport_tracker.engine.game import Game
from sport_tracker.engine.series import Series

__all__ = [
    # Constants
    "ALL_PINS",
    "FRAME_COUNT",
    "PIN_COUNT",
    "PIN_LAYOUT",
    # Value types
    "PinSet",
    "Roll",
    "SeriesTag",
    # Models
    "Frame",
    "Game",
    "Series",
    # Errors
    "BowlingError",
    "FrameClosed",
    "GameComplete",
    "IllegalFrameScore",
    "InvalidPinSelection",
]
