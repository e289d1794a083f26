"""Page renderers for Sport Tracker."""

from sport_tracker.ui.views.series_list import render_series_page
from sport_tracker.ui.views.game import render_game_page

__all__ = ["render_series_page", "render_game_page"]
