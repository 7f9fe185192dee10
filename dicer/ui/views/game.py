"""Game page: dice tray, phase controls and status sidebar."""

from __future__ import annotations

import logging

import streamlit as st

from dicer.engine import ActionEvent, GameAction, TurnController, TurnPhase
from dicer.ui.components import (
    render_dice_tray,
    render_status_sidebar,
    render_turn_controls,
)
from dicer.ui.themes import render_logo, render_outcome_banner

logger = logging.getLogger(__name__)


def _get_controller() -> TurnController:
    ss = st.session_state
    if "controller" not in ss:
        ss["controller"] = TurnController()
    return ss["controller"]


def _select_die(controller: TurnController, index: int) -> None:
    """Walk the cursor to ``index`` and toggle it."""
    while controller.cursor < index:
        controller.move_right()
    while controller.cursor > index:
        controller.move_left()
    controller.toggle_selection()


def render_game_page() -> None:
    """Render the game and apply at most one player action per run."""
    controller = _get_controller()
    snapshot = controller.snapshot()

    if snapshot.quit_requested:
        st.title("Thanks for playing!")
        if st.button("Play again", key="btn_play_again"):
            del st.session_state["controller"]
            st.rerun()
        st.stop()

    render_logo()

    main_col, side_col = st.columns([3, 1])

    with side_col:
        render_status_sidebar(
            snapshot.lives,
            snapshot.max_lives,
            snapshot.round_number,
            snapshot.ailments,
        )
        if st.button("Quit", key="btn_quit", use_container_width=True):
            controller.dispatch(ActionEvent(GameAction.QUIT))
            st.rerun()

    with main_col:
        if snapshot.phase in (TurnPhase.RESULTS, TurnPhase.GAME_OVER):
            is_hit = (
                controller.has_won
                if snapshot.phase is TurnPhase.GAME_OVER
                else snapshot.removed_ailment
            )
            render_outcome_banner(snapshot.message, is_hit)
        else:
            st.markdown(f"**{snapshot.message}**")

        toggled = render_dice_tray(
            snapshot.dice,
            snapshot.selected,
            snapshot.cursor,
            snapshot.round_number,
            can_select=snapshot.phase is TurnPhase.ROLL,
        )
        if toggled is not None:
            _select_die(controller, toggled)
            st.rerun()

        if snapshot.debug:
            st.warning(snapshot.debug)

        event = render_turn_controls(snapshot)
        if event is not None:
            logger.debug("UI action %s", event.action.name)
            controller.dispatch(event)
            st.rerun()
