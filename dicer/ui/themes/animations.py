"""CSS injection and HTML banner helpers for the terminal theme."""

from html import escape
from pathlib import Path

import streamlit as st


def load_css() -> None:
    """Inject the Dicer CSS theme into the Streamlit app."""
    css_path = Path(__file__).parent / "dicer.css"
    css_text = css_path.read_text(encoding="utf-8")
    st.markdown(f"<style>{css_text}</style>", unsafe_allow_html=True)


def render_logo() -> None:
    st.markdown(
        '<div class="dicer-logo"><span class="dice">Dice</span><span class="r">r</span></div>',
        unsafe_allow_html=True,
    )


def render_outcome_banner(message: str, is_hit: bool) -> None:
    """Render the round or game outcome, one line per message line."""
    css_class = "hit" if is_hit else "miss"
    body = "<br>".join(escape(line) for line in message.splitlines())
    st.markdown(
        f'<div class="outcome-banner {css_class}">{body}</div>',
        unsafe_allow_html=True,
    )
