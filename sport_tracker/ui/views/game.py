"""Game page — pin grid, score sheet and entry controls for one game."""

from __future__ import annotations

import streamlit as st

from sport_tracker.config.settings import get_settings
from sport_tracker.database.series import TransportError
from sport_tracker.engine.game import Game
from sport_tracker.ui.components.entry_controls import (
    render_entry_controls,
    render_mode_toggle,
    render_toast,
)
from sport_tracker.ui.components.pins_grid import render_pins_grid
from sport_tracker.ui.components.score_sheet import render_score_sheet
from sport_tracker.ui.views.series_list import get_series_view_model
from sport_tracker.viewmodels.game_entry import GameEntryViewModel


def _store_game(series_id: str, game: Game) -> None:
    """Append the finished game to its series and wait for the save.

    Raises:
        TransportError: If the series is gone or the save failed
    """
    series_vm = get_series_view_model()
    series = next((s for s in series_vm.series if s.id == series_id), None)
    if series is None:
        raise TransportError("Series no longer exists.")
    if not series_vm.add_game(series, game).result():
        raise TransportError(series_vm.toast.message if series_vm.toast else "Save failed.")


def _entry_view_model(series_id: str) -> GameEntryViewModel:
    """Get or create the entry view model for the active series."""
    ss = st.session_state
    vm = ss.get("entry_vm")
    if vm is None or ss.get("entry_series_id") != series_id:
        vm = GameEntryViewModel(
            on_save=lambda game: _store_game(series_id, game),
            strict=get_settings().debug,
        )
        ss["entry_vm"] = vm
        ss["entry_series_id"] = series_id
    return vm


def render_game_page() -> None:
    """Render the game entry page."""
    ss = st.session_state
    series_id = ss.get("series_id")

    if not series_id:
        ss["page"] = "series"
        st.rerun()
        return

    vm = _entry_view_model(series_id)

    if st.button("← Back to series", key="btn_back"):
        ss["page"] = "series"
        st.rerun()
        return

    snapshot = vm.snapshot()
    roll_key = len(vm.game.rolls)

    render_score_sheet(snapshot.marks, snapshot.running_totals, snapshot.current_frame)
    st.caption(
        f"Score {vm.game.total_score} · best possible {vm.game.max_possible_score()}"
    )

    fallen = render_mode_toggle(snapshot.selecting_fallen_pins)
    if fallen != snapshot.selecting_fallen_pins:
        vm.set_selecting_fallen_pins(fallen)
        st.rerun()

    tapped = render_pins_grid(
        snapshot.selected_pins,
        snapshot.disabled_pins,
        snapshot.current_frame,
        roll_key,
    )
    if tapped is not None:
        vm.toggle_pin(tapped)
        st.rerun()

    action = render_entry_controls(snapshot, roll_key)
    if action == "add_roll":
        vm.add_roll()
    elif action == "strike":
        vm.add_strike()
    elif action == "spare":
        vm.add_spare()
    elif action == "save":
        if vm.save_game():
            saved = vm.toast
            vm.new_game()
            vm.toast = saved

    if action is not None:
        ss["pending_toast"] = vm.toast
        st.rerun()

    render_toast(ss.pop("pending_toast", None))
