"""Status sidebar: lives, round number and remaining ailments."""

from __future__ import annotations

import streamlit as st


def render_status_sidebar(
    lives: int,
    max_lives: int,
    round_number: int,
    ailments: tuple[tuple[int, bool], ...],
) -> None:
    """Render the three stacked status blocks.

    Args:
        lives: Lives remaining.
        max_lives: Lives at the start of the game.
        round_number: Current round.
        ailments: ``(number, is_active)`` for every ailment.
    """
    ailment_parts = []
    for number, is_active in ailments:
        if is_active:
            ailment_parts.append(f"<span>{number}</span>")
        else:
            ailment_parts.append(f'<span class="cleared">{number}</span>')
    ailments_html = " ".join(ailment_parts) if any(a for _, a in ailments) else "None"

    hearts = "&#9829;" * max(lives, 0) + "&#9825;" * max(max_lives - lives, 0)

    st.markdown(
        f'<div class="status-block lives">Lives: {lives}<br>{hearts}</div>'
        f'<div class="status-block turn">Turn: {round_number}</div>'
        f'<div class="status-block ailments">Ailments: {ailments_html}</div>',
        unsafe_allow_html=True,
    )
