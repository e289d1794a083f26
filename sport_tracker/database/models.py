"""
Sport Tracker - Database Models

Pydantic models that mirror the Supabase `series` table. Games are stored
as JSON inside the series row, in exactly the shape produced by
``Game.to_dict``.
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from sport_tracker.engine.base import FRAME_COUNT, PIN_COUNT, SeriesTag
from sport_tracker.engine.series import Series


class RollRecord(BaseModel):
    """A single roll inside a frame."""

    knocked_down_pins: int = Field(ge=0, le=PIN_COUNT)


class FrameRecord(BaseModel):
    """A frame inside a game."""

    index: int = Field(ge=1, le=FRAME_COUNT)
    rolls: list[RollRecord] = Field(default_factory=list, max_length=3)


class GameRecord(BaseModel):
    """A game inside a series."""

    frames: list[FrameRecord] = Field(default_factory=list, max_length=FRAME_COUNT)


class SeriesRecord(BaseModel):
    """Mirrors the `series` table."""

    id: UUID | None = None
    name: str = Field(min_length=1, max_length=60)
    tag: SeriesTag = SeriesTag.PRACTICE
    games: list[GameRecord] = Field(default_factory=list)
    created_at: datetime | None = None

    model_config = {"from_attributes": True}

    @classmethod
    def from_series(cls, series: Series) -> SeriesRecord:
        """Build the record for an engine Series."""
        return cls.model_validate(series.to_dict())

    def to_series(self) -> Series:
        """Rebuild the engine Series, replaying every game's rolls.

        Raises:
            ValueError: If a stored game breaks the scoring rules
        """
        return Series.from_dict(self.model_dump(mode="json"))

    def to_row(self) -> dict:
        """Column values for an insert or update."""
        return self.model_dump(mode="json", exclude={"id", "created_at"})
