"""Visual theme for Sport Tracker."""

from sport_tracker.ui.themes.styles import load_css

__all__ = ["load_css"]
