"""
Dicer - Console Front-end

Line-oriented play in a plain terminal. Each line is either a key name
(``r``, ``left``, ``h``, ``right``, ``l``, ``space``, ``q``; an empty line
is ``enter``) or, during the expression phase, the expression itself.
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, TextIO

from dicer.config import configure_logging, get_settings
from dicer.engine import ActionEvent, GameAction, GameSnapshot, TurnController, TurnPhase, action_for_key

logger = logging.getLogger(__name__)


def render_snapshot(snapshot: GameSnapshot) -> str:
    """Plain-text view of the game state."""
    active = " ".join(str(n) for n in snapshot.active_ailments) or "None"
    lines = [
        "-" * 32,
        f"Lives: {snapshot.lives}  Turn: {snapshot.round_number}  Ailments: {active}",
    ]

    if snapshot.dice:
        cells = []
        for i, value in enumerate(snapshot.dice):
            cell = f"[ {value} ]"
            if i in snapshot.selected:
                cell = f"*{cell}*"
            if snapshot.phase is TurnPhase.ROLL and i == snapshot.cursor:
                cell = f">{cell}"
            cells.append(cell)
        lines.append(" ".join(cells))

    lines.append(snapshot.message)
    if snapshot.debug:
        lines.append(f"! {snapshot.debug}")
    lines.append(snapshot.instructions)
    return "\n".join(lines)


def parse_line(line: str, phase: TurnPhase | None) -> ActionEvent | None:
    """Turn one input line into an action for the current phase."""
    stripped = line.strip()

    if phase is TurnPhase.EXPRESSION and stripped not in ("q", "ctrl+c"):
        return ActionEvent(GameAction.SUBMIT_EXPRESSION, stripped)

    key = stripped.lower() or "enter"
    if phase is None:
        return ActionEvent(GameAction.QUIT) if key in ("q", "ctrl+c") else None

    action = action_for_key(key, phase)
    if action is None:
        return None
    return ActionEvent(action)


def run_console(
    controller: TurnController,
    read_line: Callable[[], str],
    out: TextIO,
) -> GameSnapshot:
    """Play until the controller reports a quit or input runs out."""
    snapshot = controller.snapshot()
    while not snapshot.quit_requested:
        print(render_snapshot(snapshot), file=out)
        try:
            line = read_line()
        except EOFError:
            logger.debug("Input closed; quitting")
            snapshot = controller.quit()
            break

        event = parse_line(line, snapshot.phase)
        if event is None:
            continue
        snapshot = controller.dispatch(event)

    print("Thanks for playing!", file=out)
    return snapshot


def main() -> None:
    """Console entrypoint."""
    settings = get_settings()
    configure_logging(settings)
    controller = TurnController(settings)
    try:
        run_console(controller, lambda: input("> "), sys.stdout)
    except KeyboardInterrupt:
        controller.quit()


if __name__ == "__main__":
    main()
