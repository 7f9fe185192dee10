"""
Dicer - Action Definitions

Discrete actions a front-end feeds into the turn controller, and the
default key bindings that produce them.
"""

from dataclasses import dataclass
from enum import Enum, auto

from dicer.engine.base import TurnPhase


class GameAction(Enum):
    """Actions the turn controller accepts."""

    ROLL = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    TOGGLE_SELECTION = auto()
    CONFIRM = auto()
    SUBMIT_EXPRESSION = auto()
    CONTINUE_ROUND = auto()
    RESTART_GAME = auto()
    QUIT = auto()


@dataclass(frozen=True)
class ActionEvent:
    """An action plus its data (only SUBMIT_EXPRESSION carries text)."""

    action: GameAction
    text: str = ""


# Keys that mean the same thing in every phase
_GLOBAL_KEYS: dict[str, GameAction] = {
    "q": GameAction.QUIT,
    "ctrl+c": GameAction.QUIT,
}

_PHASE_KEYS: dict[TurnPhase, dict[str, GameAction]] = {
    TurnPhase.TURN_START: {
        "r": GameAction.ROLL,
    },
    TurnPhase.ROLL: {
        "left": GameAction.MOVE_LEFT,
        "h": GameAction.MOVE_LEFT,
        "right": GameAction.MOVE_RIGHT,
        "l": GameAction.MOVE_RIGHT,
        " ": GameAction.TOGGLE_SELECTION,
        "space": GameAction.TOGGLE_SELECTION,
        "enter": GameAction.CONFIRM,
    },
    TurnPhase.EXPRESSION: {
        "enter": GameAction.SUBMIT_EXPRESSION,
    },
    TurnPhase.RESULTS: {
        " ": GameAction.CONTINUE_ROUND,
        "space": GameAction.CONTINUE_ROUND,
    },
    TurnPhase.GAME_OVER: {
        "enter": GameAction.RESTART_GAME,
    },
}


def action_for_key(key: str, phase: TurnPhase) -> GameAction | None:
    """Map a key name to the action it triggers in ``phase``, if any."""
    if key in _GLOBAL_KEYS:
        return _GLOBAL_KEYS[key]
    return _PHASE_KEYS.get(phase, {}).get(key)
