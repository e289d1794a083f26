"""Sport Tracker — Streamlit Application Entrypoint."""

from __future__ import annotations

import streamlit as st


_SCORING_RULES = """\
**Goal:** Knock down as many pins as possible over ten frames.

**Frames 1-9:** Up to two rolls at a rack of ten pins.
- **Strike (X)** = all ten on the first roll — 10 + next two rolls
- **Spare (/)** = all ten over two rolls — 10 + next roll
- Open frame = pins knocked down

**Frame 10:** A strike or spare earns a third roll. The rack is reset
after every strike and spare. A perfect game is 300.
"""


def main() -> None:
    """Application entrypoint. Must call ``st.set_page_config`` first."""
    st.set_page_config(
        page_title="Sport Tracker",
        page_icon="🎳",
        layout="centered",
        initial_sidebar_state="collapsed",
    )

    from sport_tracker.config.settings import configure_logging, get_settings
    from sport_tracker.ui.themes import load_css

    if "_logging_configured" not in st.session_state:
        configure_logging(get_settings())
        st.session_state["_logging_configured"] = True
    load_css()

    # Session state defaults
    if "page" not in st.session_state:
        st.session_state["page"] = "series"

    # Page routing (lazy imports to avoid circular deps)
    page = st.session_state["page"]

    if page == "series":
        from sport_tracker.ui.views.series_list import render_series_page
        render_series_page()
    elif page == "game":
        from sport_tracker.ui.views.game import render_game_page
        render_game_page()
    else:
        st.session_state["page"] = "series"
        st.rerun()

    with st.sidebar:
        st.markdown("### Scoring")
        st.markdown(_SCORING_RULES)


if __name__ == "__main__":
    main()
