"""Score sheet component — marks and running totals for all ten frames."""

from __future__ import annotations

import streamlit as st


def render_score_sheet(
    marks: tuple[tuple[str, ...], ...],
    running_totals: tuple[int | None, ...],
    current_frame: int | None,
) -> None:
    """Render the classic ten-box bowling score sheet.

    Args:
        marks: Per-frame roll symbols (``X``, ``/``, ``-`` or digits).
        running_totals: Cumulative score per frame, ``None`` if unresolved.
        current_frame: Frame being entered, highlighted; ``None`` when complete.
    """
    html = ['<div class="score-sheet">']
    for idx, (frame_marks, total) in enumerate(zip(marks, running_totals), start=1):
        classes = ["frame"]
        if idx == current_frame:
            classes.append("active")
        if idx == len(marks):
            classes.append("last")

        boxes = "".join(f'<span class="mark">{m}</span>' for m in frame_marks)
        total_display = "" if total is None else str(total)

        html.append(
            f'<div class="{" ".join(classes)}">'
            f'<div class="frame-no">{idx}</div>'
            f'<div class="marks">{boxes}</div>'
            f'<div class="total">{total_display}</div>'
            f"</div>"
        )
    html.append("</div>")
    st.markdown("".join(html), unsafe_allow_html=True)
