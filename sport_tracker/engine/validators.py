"""
Sport Tracker - Input Validation Utilities

Provides validation functions for bowling engine inputs. All validators
either return validated data or raise descriptive ValueError exceptions.
"""

from typing import Iterable

from sport_tracker.engine.base import ALL_PINS, FRAME_COUNT
from sport_tracker.engine.errors import InvalidPinSelection


def validate_pin_numbers(pins: Iterable[int]) -> frozenset[int]:
    """
    Validate pin numbers picked by the user.

    Args:
        pins: Collection of pin numbers

    Returns:
        Validated pins as a frozenset

    Raises:
        ValueError: If any entry is not an integer
        InvalidPinSelection: If any pin is outside 1-10
    """
    pins_set = frozenset(pins)

    for pin in pins_set:
        if isinstance(pin, bool) or not isinstance(pin, int):
            raise ValueError(f"Pin number must be an integer, got {type(pin).__name__}.")

    stray = pins_set - ALL_PINS
    if stray:
        raise InvalidPinSelection(stray)

    return pins_set


def validate_frame_index(index: int) -> int:
    """
    Validate a frame number.

    Args:
        index: Frame number, 1-based

    Returns:
        Validated index

    Raises:
        ValueError: If index is not 1-10
    """
    if isinstance(index, bool) or not isinstance(index, int):
        raise ValueError(f"Frame index must be an integer, got {type(index).__name__}.")

    if not (1 <= index <= FRAME_COUNT):
        raise ValueError(f"Frame index must be 1-{FRAME_COUNT}, got {index}.")

    return index


def validate_series_name(name: str) -> str:
    """Strip and validate a series name (1-60 characters)."""
    if not isinstance(name, str):
        raise ValueError(f"Series name must be a string, got {type(name).__name__}.")

    stripped = name.strip()
    if not stripped:
        raise ValueError("Series name cannot be empty.")
    if len(stripped) > 60:
        raise ValueError(f"Series name must be at most 60 characters, got {len(stripped)}.")

    return stripped
