"""Dice tray component: renders dice with reroll selection toggles."""

from __future__ import annotations

import streamlit as st


def render_dice_tray(
    dice: tuple[int, ...],
    selected: frozenset[int],
    cursor: int,
    round_number: int,
    can_select: bool,
) -> int | None:
    """Render the dice row and, during the roll phase, one toggle per die.

    Args:
        dice: Current dice face values (empty before the first roll).
        selected: Indices marked for reroll.
        cursor: Index of the die under the selection cursor.
        round_number: Current round (used in button keys).
        can_select: Whether reroll toggles are active.

    Returns:
        Index of the die whose toggle was clicked, or ``None``.
    """
    if not dice:
        st.markdown(
            '<div class="dice-tray">'
            '<span style="color:var(--text-secondary);font-style:italic;">'
            "Roll the dice to begin your turn."
            "</span></div>",
            unsafe_allow_html=True,
        )
        return None

    html_parts = ['<div class="dice-tray">']
    for i, val in enumerate(dice):
        classes = ["die"]
        if i in selected:
            classes.append("selected")
        if can_select and i == cursor:
            classes.append("cursor")
        html_parts.append(f'<div class="{" ".join(classes)}">{val}</div>')
    html_parts.append("</div>")
    st.markdown("".join(html_parts), unsafe_allow_html=True)

    if not can_select:
        return None

    clicked: int | None = None
    cols = st.columns(len(dice))
    for i, col in enumerate(cols):
        with col:
            label = "Rerolling" if i in selected else "Reroll"
            key = f"toggle_{i}_r{round_number}"
            if st.button(
                label,
                key=key,
                use_container_width=True,
                type="primary" if i in selected else "secondary",
            ):
                clicked = i
    return clicked
