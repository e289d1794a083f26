"""
Sport Tracker - Series

Games bowled in one sitting, tagged by category.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from sport_tracker.engine.base import SeriesTag
from sport_tracker.engine.game import Game
from sport_tracker.engine.validators import validate_series_name


@dataclass
class Series:
    """
    An ordered collection of games.

    Attributes:
        name: Display name
        tag: Category (league, practice, tournament)
        games: Games in the order they were added
        id: Identity assigned by the persistence layer, None until saved
    """
    name: str
    tag: SeriesTag = SeriesTag.PRACTICE
    games: list[Game] = field(default_factory=list)
    id: str | None = None

    def __post_init__(self) -> None:
        self.name = validate_series_name(self.name)
        if not isinstance(self.tag, SeriesTag):
            self.tag = SeriesTag(self.tag)

    def add_game(self, game: Game) -> None:
        self.games.append(game)

    def remove_game(self, game: Game) -> None:
        """
        Remove a game by identity.

        Raises:
            ValueError: If this exact game object is not in the series
        """
        for position, candidate in enumerate(self.games):
            if candidate is game:
                del self.games[position]
                return
        raise ValueError("Game is not part of this series.")

    @property
    def total_score(self) -> int:
        return sum(game.total_score for game in self.games)

    @property
    def average_score(self) -> float | None:
        """Mean total of the complete games, None when none are complete."""
        complete = [game.total_score for game in self.games if game.is_complete]
        if not complete:
            return None
        return sum(complete) / len(complete)

    def to_dict(self) -> dict:
        """Convert to the persisted record shape."""
        return {
            "id": self.id,
            "name": self.name,
            "tag": self.tag.value,
            "games": [game.to_dict() for game in self.games],
        }

    @classmethod
    def from_dict(cls, data: dict) -> Series:
        return cls(
            id=data.get("id"),
            name=data["name"],
            tag=SeriesTag(data.get("tag", SeriesTag.PRACTICE.value)),
            games=[Game.from_dict(game) for game in data.get("games", [])],
        )
