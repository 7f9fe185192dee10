"""
Dicer - Game Engine Base Definitions

This module defines the foundational enums, constants and exceptions used
throughout the game engine. Nothing here depends on the UI or on settings.
"""

from enum import Enum, auto


DIE_FACES = 6
REMOVED_AILMENT_VALUE = -1

OPERATORS: dict[str, int] = {
    "+": 1,
    "-": 1,
    "*": 2,
    "/": 2,
}

BRACKET_PAIRS: dict[str, str] = {
    ")": "(",
    "]": "[",
    "}": "{",
}
OPENING_BRACKETS = frozenset(BRACKET_PAIRS.values())
CLOSING_BRACKETS = frozenset(BRACKET_PAIRS)


class TurnPhase(Enum):
    """Named steps of a round, held on the phase stack."""
    TURN_START = auto()   # Waiting for the roll
    ROLL = auto()         # Re-roll selection
    EXPRESSION = auto()   # Gather the typed expression
    RESULTS = auto()      # Show result of the expression
    GAME_OVER = auto()    # Terminal phase until restart


# =============================================================================
# EXCEPTIONS
# =============================================================================

class PhaseStackError(Exception):
    """Misuse of the phase stack. Fatal to the running game."""


class StackEmptyError(PhaseStackError):
    """Raised when reading the top of an empty stack."""


class StackFullError(PhaseStackError):
    """Raised when pushing onto a stack that is at capacity."""


class ExpressionError(ValueError):
    """An expression could not be evaluated."""


class UnbalancedExpressionError(ExpressionError):
    """A postfix expression ran out of operands."""


class ExpressionDivisionError(ExpressionError, ZeroDivisionError):
    """An expression divided by zero."""
