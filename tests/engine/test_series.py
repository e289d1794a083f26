"""
Sport Tracker - Series Tests
"""

import pytest

from sport_tracker.engine.base import SeriesTag
from sport_tracker.engine.game import Game
from sport_tracker.engine.series import Series


class TestSeries:
    def test_defaults(self):
        series = Series(name="Practice")
        assert series.tag is SeriesTag.PRACTICE
        assert series.games == []
        assert series.id is None

    def test_tag_from_string(self):
        assert Series(name="Tuesday", tag="league").tag is SeriesTag.LEAGUE

    def test_invalid_tag(self):
        with pytest.raises(ValueError):
            Series(name="Tuesday", tag="bocce")

    def test_name_validated(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            Series(name="")

    def test_games_keep_insertion_order(self, make_game):
        series = Series(name="League")
        first, second = make_game(10), make_game(3)
        series.add_game(first)
        series.add_game(second)
        assert series.games[0] is first
        assert series.games[1] is second

    def test_remove_by_identity(self):
        series = Series(name="League")
        a, b = Game(), Game()
        series.add_game(a)
        series.add_game(b)

        series.remove_game(b)

        assert len(series.games) == 1
        assert series.games[0] is a

    def test_remove_equal_but_different_game_raises(self):
        series = Series(name="League")
        series.add_game(Game())
        with pytest.raises(ValueError, match="not part of this series"):
            series.remove_game(Game())
        assert len(series.games) == 1


class TestSeriesScores:
    def test_total_and_average(self, make_game):
        series = Series(name="League")
        series.add_game(make_game(*([10] * 12)))
        series.add_game(make_game(*([9, 0] * 10)))
        assert series.total_score == 390
        assert series.average_score == 195

    def test_average_ignores_unfinished(self, make_game):
        series = Series(name="League")
        series.add_game(make_game(*([9, 0] * 10)))
        series.add_game(make_game(9, 0))
        assert series.average_score == 90
        assert series.total_score == 99

    def test_average_none_without_complete_games(self):
        series = Series(name="League")
        series.add_game(Game())
        assert series.average_score is None


class TestSeriesRecords:
    def test_to_dict(self, make_game):
        series = Series(name="League", tag=SeriesTag.LEAGUE, id="abc")
        series.add_game(make_game(10))
        data = series.to_dict()
        assert data["id"] == "abc"
        assert data["name"] == "League"
        assert data["tag"] == "league"
        assert len(data["games"]) == 1

    def test_round_trip(self, scored_games, make_game):
        series = Series(name="Mixed", tag=SeriesTag.TOURNAMENT, id="s-1")
        for rolls, _, _ in scored_games.values():
            series.add_game(make_game(*rolls))

        restored = Series.from_dict(series.to_dict())

        assert restored.to_dict() == series.to_dict()
        assert [g.total_score for g in restored.games] == [
            expected for _, expected, _ in scored_games.values()
        ]
