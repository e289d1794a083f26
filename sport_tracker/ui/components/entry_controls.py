"""Entry controls — pick mode toggle and Add Roll / Strike / Spare / Save buttons."""

from __future__ import annotations

import streamlit as st

from sport_tracker.viewmodels.events import Toast, ToastType
from sport_tracker.viewmodels.game_entry import EntrySnapshot


def render_mode_toggle(selecting_fallen_pins: bool) -> bool:
    """Render the "Left Over Pins / Fallen Pins" switch.

    Returns:
        The new value of ``selecting_fallen_pins``.
    """
    return st.toggle(
        "Select fallen pins" if selecting_fallen_pins else "Select left over pins",
        value=selecting_fallen_pins,
        key="entry_selecting_fallen",
    )


def render_entry_controls(snapshot: EntrySnapshot, roll_key: int) -> str | None:
    """Render the command buttons, enabled from the snapshot's readiness flags.

    Returns:
        ``"add_roll"``, ``"strike"``, ``"spare"``, ``"save"``, or ``None`` if
        no action taken.
    """
    cols = st.columns([3, 1, 1])

    with cols[0]:
        if st.button(
            "Add Roll",
            key=f"btn_add_roll_{roll_key}",
            use_container_width=True,
            disabled=not snapshot.add_roll_is_enabled,
            type="primary",
        ):
            return "add_roll"

    with cols[1]:
        if st.button(
            "X",
            key=f"btn_strike_{roll_key}",
            use_container_width=True,
            disabled=not snapshot.strike_is_enabled,
        ):
            return "strike"

    with cols[2]:
        if st.button(
            "/",
            key=f"btn_spare_{roll_key}",
            use_container_width=True,
            disabled=not snapshot.spare_is_enabled,
        ):
            return "spare"

    if st.button(
        "Save Game",
        key="btn_save_game",
        use_container_width=True,
        disabled=not snapshot.save_game_is_enabled,
    ):
        return "save"

    return None


def render_toast(toast: Toast | None) -> None:
    """Show a toast notice, if any."""
    if toast is None:
        return
    icons = {
        ToastType.SUCCESS: "✅",
        ToastType.INFO: "ℹ️",
        ToastType.WARNING: "⚠️",
        ToastType.ERROR: "❌",
    }
    st.toast(toast.message, icon=icons[toast.type])
