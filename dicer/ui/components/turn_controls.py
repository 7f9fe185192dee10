"""Turn control widgets: Roll, Confirm, expression entry, Continue, Restart."""

from __future__ import annotations

import streamlit as st

from dicer.engine import ActionEvent, GameAction, GameSnapshot, TurnPhase


def render_turn_controls(snapshot: GameSnapshot) -> ActionEvent | None:
    """Render the controls for the current phase.

    Returns:
        The action the player took, or ``None`` if no action was taken.
    """
    phase = snapshot.phase
    round_key = snapshot.round_number

    if phase is TurnPhase.TURN_START:
        if st.button("Roll Dice", key=f"btn_roll_r{round_key}", type="primary", use_container_width=True):
            return ActionEvent(GameAction.ROLL)

    elif phase is TurnPhase.ROLL:
        count = len(snapshot.selected)
        label = f"Reroll {count} and continue" if count else "Keep all and continue"
        if st.button(label, key=f"btn_confirm_r{round_key}", type="primary", use_container_width=True):
            return ActionEvent(GameAction.CONFIRM)

    elif phase is TurnPhase.EXPRESSION:
        # A new key per attempt clears the field after a rejected submission
        with st.form(key=f"expr_form_r{round_key}_a{snapshot.attempts}", clear_on_submit=True):
            text = st.text_input(
                "Expression",
                placeholder="( x + y ) / z",
                max_chars=24,
            )
            if st.form_submit_button("Submit", type="primary", use_container_width=True):
                return ActionEvent(GameAction.SUBMIT_EXPRESSION, text)

    elif phase is TurnPhase.RESULTS:
        if st.button("Continue", key=f"btn_continue_r{round_key}", type="primary", use_container_width=True):
            return ActionEvent(GameAction.CONTINUE_ROUND)

    elif phase is TurnPhase.GAME_OVER:
        if st.button("Restart Game", key="btn_restart", type="primary", use_container_width=True):
            return ActionEvent(GameAction.RESTART_GAME)

    return None
