"""
Dicer Game Engine.

Pure Python game logic with zero UI dependencies.
Handles the phase stack, dice, ailments, and expression checking/evaluation.
"""

from dicer.engine.base import (
    ExpressionDivisionError,
    ExpressionError,
    PhaseStackError,
    StackEmptyError,
    StackFullError,
    TurnPhase,
    UnbalancedExpressionError,
)
from dicer.engine.dice import DiceSet, Die
from dicer.engine.events import ActionEvent, GameAction, action_for_key
from dicer.engine.expression import evaluate_expression, evaluate_postfix, infix_to_postfix
from dicer.engine.player import AilmentRegistry, Player
from dicer.engine.stack import PhaseStack, Stack
from dicer.engine.turn import GameSnapshot, Turn, TurnController
from dicer.engine.validators import ValidationResult, validate_expression

__all__ = [
    # State
    "AilmentRegistry",
    "DiceSet",
    "Die",
    "GameSnapshot",
    "PhaseStack",
    "Player",
    "Stack",
    "Turn",
    "TurnController",
    # Enums / Actions
    "ActionEvent",
    "GameAction",
    "TurnPhase",
    "action_for_key",
    # Expressions
    "ValidationResult",
    "evaluate_expression",
    "evaluate_postfix",
    "infix_to_postfix",
    "validate_expression",
    # Errors
    "ExpressionDivisionError",
    "ExpressionError",
    "PhaseStackError",
    "StackEmptyError",
    "StackFullError",
    "UnbalancedExpressionError",
]
