"""Pins grid component — the rack laid out as on the lane, tap to select."""

from __future__ import annotations

import streamlit as st

from sport_tracker.engine.base import PIN_LAYOUT


def render_pins_grid(
    selected_pins: frozenset[int],
    disabled_pins: frozenset[int],
    frame_index: int | None,
    roll_key: int,
) -> int | None:
    """Render one button per pin, back row first.

    Args:
        selected_pins: Pins picked for the pending roll.
        disabled_pins: Pins already down this rack.
        frame_index: Frame being entered (used in button keys).
        roll_key: Counter that changes after every roll (used in button keys).

    Returns:
        The tapped pin number, or ``None`` if nothing was tapped.
    """
    tapped: int | None = None
    width = len(PIN_LAYOUT[0])

    for row in PIN_LAYOUT:
        # Centre shorter rows under the back row
        pad = (width - len(row)) / 2
        spec = ([pad] if pad else []) + [1] * len(row) + ([pad] if pad else [])
        cols = st.columns(spec)
        offset = 1 if pad else 0
        for i, pin in enumerate(row):
            with cols[i + offset]:
                is_selected = pin in selected_pins
                if st.button(
                    str(pin),
                    key=f"pin_{pin}_f{frame_index}_r{roll_key}",
                    use_container_width=True,
                    disabled=pin in disabled_pins,
                    type="primary" if is_selected else "secondary",
                ):
                    tapped = pin

    return tapped
