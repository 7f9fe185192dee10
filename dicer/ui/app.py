"""Dicer: Streamlit Application Entrypoint."""

from __future__ import annotations

import streamlit as st

from dicer.config import configure_logging, get_settings


_RULES = """\
**Goal:** Cure every ailment before you run out of lives!

**Each round:**
- Roll the dice
- Pick any dice to reroll (once)
- Write an expression that uses **every** die exactly once
- Operators: `+ - * /` and brackets `( ) [ ] { }`
- Put a space between every symbol: `( 4 + 2 ) / 6`

**Results:**
| Result | Effect |
|---|---|
| Matches an active ailment | Ailment cured |
| Anything else | Lose a life |

Division rounds toward zero.
"""


def _render_sidebar_rules() -> None:
    with st.sidebar:
        st.markdown("### How to Play")
        st.markdown(_RULES)


def main() -> None:
    """Application entrypoint. Must call ``st.set_page_config`` first."""
    st.set_page_config(
        page_title="Dicer",
        page_icon="🎲",
        layout="wide",
        initial_sidebar_state="collapsed",
    )

    if "_logging_configured" not in st.session_state:
        configure_logging(get_settings())
        st.session_state["_logging_configured"] = True

    from dicer.ui.themes import load_css
    load_css()

    _render_sidebar_rules()

    from dicer.ui.views import render_game_page
    render_game_page()


if __name__ == "__main__":
    main()
