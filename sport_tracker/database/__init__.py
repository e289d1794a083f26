"""
Sport Tracker Database Layer.

Supabase integration for series persistence.
"""

from sport_tracker.database.client import get_supabase_client
from sport_tracker.database.models import FrameRecord, GameRecord, RollRecord, SeriesRecord
from sport_tracker.database.series import SeriesManager, TransportError

__all__ = [
    "get_supabase_client",
    "FrameRecord",
    "GameRecord",
    "RollRecord",
    "SeriesManager",
    "SeriesRecord",
    "TransportError",
]
