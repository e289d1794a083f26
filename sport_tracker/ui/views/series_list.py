"""Series page — list of series, create form, per-series games and averages."""

from __future__ import annotations

import streamlit as st

from sport_tracker.config.settings import get_settings
from sport_tracker.database.client import get_supabase_client
from sport_tracker.database.series import SeriesManager
from sport_tracker.engine.base import SeriesTag
from sport_tracker.ui.components.entry_controls import render_toast
from sport_tracker.viewmodels.series_list import SeriesContentState, SeriesListViewModel


def get_series_view_model() -> SeriesListViewModel:
    """Get or create the session's series list view model."""
    ss = st.session_state
    if "series_vm" not in ss:
        manager = SeriesManager(get_supabase_client(), get_settings().series_table)
        vm = SeriesListViewModel(manager)
        vm.load().result()
        ss["series_vm"] = vm
    return ss["series_vm"]


def _render_create_form(vm: SeriesListViewModel) -> None:
    with st.form("create_series", clear_on_submit=True):
        name = st.text_input("Series name", max_chars=60)
        tag = st.selectbox(
            "Category",
            options=list(SeriesTag),
            format_func=lambda t: t.value.title(),
        )
        if st.form_submit_button("Add Series", use_container_width=True):
            vm.add_series(name, tag).result()
            render_toast(vm.toast)


def render_series_page() -> None:
    """Render the series list page."""
    ss = st.session_state
    st.title("Bowling Series")

    vm = get_series_view_model()
    render_toast(ss.pop("pending_toast", None))

    if vm.state is SeriesContentState.LOADING:
        st.info("Loading series...")
        return

    _render_create_form(vm)
    st.divider()

    if vm.state is SeriesContentState.EMPTY:
        st.caption("No series yet. Add one above to start bowling.")
        return

    for series in vm.series:
        average = series.average_score
        header = f"{series.name} · {series.tag.value.title()} · {len(series.games)} game(s)"
        with st.expander(header):
            for number, game in enumerate(series.games, start=1):
                st.markdown(f"**Game {number}:** {game.total_score}")
            if average is not None:
                st.markdown(f"**Average:** {average:.1f} · **Series total:** {series.total_score}")

            cols = st.columns(2)
            with cols[0]:
                if st.button("Bowl a game", key=f"btn_play_{series.id}", use_container_width=True):
                    ss["series_id"] = series.id
                    ss["page"] = "game"
                    st.rerun()
            with cols[1]:
                if st.button("Delete", key=f"btn_delete_{series.id}", use_container_width=True):
                    future = vm.delete_series(series)
                    if future is not None:
                        future.result()
                    ss["pending_toast"] = vm.toast
                    st.rerun()
