"""
Dicer - Input Validation Utilities

Validation for engine inputs. The dice and index validators either return
normalized data or raise descriptive ValueError exceptions; the expression
validator returns a ValidationResult so the reason can be shown to the
player.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Sequence

from dicer.engine.base import (
    CLOSING_BRACKETS,
    DIE_FACES,
    OPENING_BRACKETS,
    OPERATORS,
)
from dicer.engine.expression import is_balanced, is_space_delimited


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of checking a typed expression.

    Attributes:
        is_valid: Whether the expression may be evaluated
        reason: Human-readable failure reason (empty when valid)
    """
    is_valid: bool
    reason: str = ""

    def __bool__(self) -> bool:
        return self.is_valid


VALID = ValidationResult(is_valid=True)

_DIGITS = frozenset("0123456789")
_SYMBOLS = frozenset(OPERATORS) | OPENING_BRACKETS | CLOSING_BRACKETS | _DIGITS


def validate_dice_values(values: Sequence[int], min_count: int = 1) -> tuple[int, ...]:
    """
    Validate and normalize D6 values.

    Raises:
        ValueError: If there are too few values or any is outside 1-6
    """
    values_tuple = tuple(values)
    count = len(values_tuple)

    if count < min_count:
        raise ValueError(f"At least {min_count} dice required, got {count}.")

    for i, value in enumerate(values_tuple):
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(f"Die value at index {i} must be an integer, got {type(value).__name__}.")
        if not (1 <= value <= DIE_FACES):
            raise ValueError(
                f"Die value at index {i} is {value}, must be between 1 and {DIE_FACES}."
            )

    return values_tuple


def validate_dice_indices(indices: Iterable[int], dice_count: int) -> frozenset[int]:
    """
    Validate indices of dice selected for a reroll.

    Raises:
        ValueError: If any index is out of range
    """
    indices_set = frozenset(indices)

    for idx in indices_set:
        if not isinstance(idx, int):
            raise ValueError(f"Dice index must be an integer, got {type(idx).__name__}.")
        if not (0 <= idx < dice_count):
            raise ValueError(
                f"Dice index {idx} is out of range. Must be between 0 and {dice_count - 1}."
            )

    return indices_set


def validate_expression(expression: str, dice: Sequence[int]) -> ValidationResult:
    """
    Check a typed expression against the current dice.

    Every token is a single character separated by spaces, so the checks
    work character by character. In order, stopping at the first failure:

    1. Brackets are balanced, each closed by its own kind
    2. No two adjacent characters are both non-space
    3. Every character is a digit, an operator, a bracket or a space
    4. The digits are exactly the dice values, each used once
    5. There are exactly ``len(dice) - 1`` operators

    Args:
        expression: Raw text typed by the player
        dice: Current die values

    Returns:
        ValidationResult with the first failure reason, or VALID
    """
    if not is_balanced(expression):
        return ValidationResult(False, "Brackets not balanced")

    if not is_space_delimited(expression):
        return ValidationResult(False, "Every character must be separated by a space")

    for char in expression:
        if char != " " and char not in _SYMBOLS:
            return ValidationResult(False, f"Unrecognized symbol '{char}'")

    remaining = Counter(dice)
    operator_count = 0
    for char in expression:
        if char in _DIGITS:
            value = int(char)
            if remaining[value] == 0:
                return ValidationResult(False, "Expression doesn't include all dice rolls")
            remaining[value] -= 1
        elif char in OPERATORS:
            operator_count += 1

    if sum(remaining.values()) > 0:
        return ValidationResult(False, "Expression doesn't include all dice rolls")

    expected_operators = len(dice) - 1
    if operator_count != expected_operators:
        return ValidationResult(
            False, f"Expression must use exactly {expected_operators} operators"
        )

    return VALID
