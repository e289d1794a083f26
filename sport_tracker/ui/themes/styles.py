"""CSS injection for the score sheet and pin grid."""

import streamlit as st

_CSS = """
.score-sheet {
    display: flex;
    border: 2px solid #333;
    border-radius: 6px;
    overflow-x: auto;
    margin-bottom: 0.75rem;
}
.score-sheet .frame {
    flex: 1 0 3.2rem;
    border-right: 1px solid #333;
    text-align: center;
    font-family: monospace;
}
.score-sheet .frame.last {
    flex-basis: 4.8rem;
    border-right: none;
}
.score-sheet .frame.active {
    background: rgba(255, 140, 0, 0.15);
}
.score-sheet .frame-no {
    font-size: 0.7rem;
    border-bottom: 1px solid #999;
}
.score-sheet .marks {
    display: flex;
    justify-content: flex-end;
    min-height: 1.4rem;
}
.score-sheet .mark {
    width: 1.4rem;
    border-left: 1px solid #999;
}
.score-sheet .total {
    min-height: 1.6rem;
    font-weight: bold;
}
"""


def load_css() -> None:
    """Inject the app CSS into the Streamlit page."""
    st.markdown(f"<style>{_CSS}</style>", unsafe_allow_html=True)
