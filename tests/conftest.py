"""
Sport Tracker - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

from typing import Callable
from unittest.mock import MagicMock

import pytest

from sport_tracker.engine.game import Game


# =============================================================================
# COMPLETE GAME TEST DATA
# =============================================================================

@pytest.fixture
def scored_games() -> dict[str, tuple[tuple[int, ...], int, str]]:
    """
    Complete games with their expected totals.

    Returns:
        Dict mapping name to (rolls, expected_total, description)
    """
    return {
        "perfect": ((10,) * 12, 300, "Twelve strikes"),
        "gutter": ((0,) * 20, 0, "All gutter balls"),
        "all_nines": ((9, 0) * 10, 90, "Nine and a miss every frame"),
        "all_spares": ((5, 5) * 10 + (5,), 150, "5/ every frame, 5 fill ball"),
        "all_ones": ((1,) * 20, 20, "One pin every roll"),
        "dutch_200": ((10, 5, 5) * 5 + (10,), 200, "Strike/spare alternation"),
        "tenth_spare_strike": ((0,) * 18 + (7, 3, 10), 20, "Spare then strike in the 10th"),
        "tenth_open": ((10,) * 9 + (3, 4), 257, "Nine strikes and an open 10th"),
        "heartbreak": ((10,) * 11 + (9,), 299, "Eleven strikes and a nine"),
    }


@pytest.fixture
def make_game() -> Callable[..., Game]:
    """Build a game by appending the given pin counts in order."""

    def _make(*rolls: int) -> Game:
        game = Game()
        for pins in rolls:
            game.append_roll(pins)
        return game

    return _make


# =============================================================================
# PERSISTENCE FIXTURES
# =============================================================================

SERIES_ID = "3f1c2a9e-7b4d-4e58-9c61-0a2b3c4d5e6f"


@pytest.fixture
def series_row() -> dict:
    """A `series` table row holding one perfect game."""
    return {
        "id": SERIES_ID,
        "name": "Tuesday League",
        "tag": "league",
        "games": [
            {
                "frames": [
                    {"index": i, "rolls": [{"knocked_down_pins": 10}]}
                    for i in range(1, 10)
                ] + [
                    {"index": 10, "rolls": [{"knocked_down_pins": 10}] * 3}
                ]
            }
        ],
        "created_at": "2026-10-01T19:30:00+00:00",
    }


@pytest.fixture
def mock_client() -> MagicMock:
    """Minimal mock Supabase client."""
    return MagicMock()
