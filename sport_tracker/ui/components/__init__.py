"""UI components for Sport Tracker."""

from sport_tracker.ui.components.entry_controls import (
    render_entry_controls,
    render_mode_toggle,
    render_toast,
)
from sport_tracker.ui.components.pins_grid import render_pins_grid
from sport_tracker.ui.components.score_sheet import render_score_sheet

__all__ = [
    "render_entry_controls",
    "render_mode_toggle",
    "render_pins_grid",
    "render_score_sheet",
    "render_toast",
]
