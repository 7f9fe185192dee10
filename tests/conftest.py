"""
Dicer - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

import random

import pytest

from dicer.config.settings import Settings
from dicer.engine.base import TurnPhase
from dicer.engine.dice import DiceSet
from dicer.engine.turn import TurnController


# =============================================================================
# EXPRESSION TEST DATA
# =============================================================================

@pytest.fixture
def valid_expressions() -> dict[str, tuple[tuple[int, ...], str, str, int]]:
    """
    Accepted expressions with their conversions.

    Returns:
        Dict mapping name to (dice_values, infix, postfix, result)
    """
    return {
        "all_addition": ((4, 2, 6), "4 + 2 + 6", "4 2 + 6 +", 12),
        "grouped_product": ((3, 3, 1), "( 3 + 3 ) * 1", "3 3 + 1 *", 6),
        "precedence": ((2, 3, 4), "2 + 3 * 4", "2 3 4 * +", 14),
        "left_subtraction": ((6, 1, 2), "6 - 1 - 2", "6 1 - 2 -", 3),
        "left_division": ((6, 3, 2), "6 / 3 / 2", "6 3 / 2 /", 1),
        "square_brackets": ((6, 1, 2), "[ 6 - 1 ] * 2", "6 1 - 2 *", 10),
        "curly_brackets": ((6, 4, 2), "6 / { 4 - 2 }", "6 4 2 - /", 3),
        "truncation": ((5, 1, 2), "5 * 1 / 2", "5 1 * 2 /", 2),
        "negative_result": ((1, 5, 2), "1 - 5 * 2", "1 5 2 * -", -9),
    }


@pytest.fixture
def invalid_expressions() -> dict[str, tuple[tuple[int, ...], str, str]]:
    """
    Rejected expressions.

    Returns:
        Dict mapping name to (dice_values, infix, expected reason fragment)
    """
    return {
        "no_spaces": ((5, 1, 2), "5+1+2", "separated by a space"),
        "missing_die": ((5, 1, 2), "5 + 1", "all dice rolls"),
        "extra_operand": ((5, 1, 2), "5 + 1 + 2 3", "all dice rolls"),
        "wrong_value": ((5, 1, 2), "5 + 1 + 3", "all dice rolls"),
        "unbalanced": ((5, 1, 2), "( 5 + 1 + 2", "not balanced"),
        "mismatched_brackets": ((5, 1, 2), "( 5 + 1 ] + 2", "not balanced"),
        "too_many_operators": ((5, 1, 2), "5 + 1 + - 2", "exactly 2 operators"),
        "too_few_operators": ((5, 1, 2), "5 1 + 2", "exactly 2 operators"),
        "unknown_symbol": ((5, 1, 2), "5 + 1 % 2", "Unrecognized symbol"),
        "empty": ((5, 1, 2), "", "all dice rolls"),
    }


# =============================================================================
# GAME STATE FIXTURES
# =============================================================================

@pytest.fixture
def settings() -> Settings:
    """Standard game settings, isolated from the environment."""
    return Settings(
        _env_file=None,
        max_lives=3,
        num_ailments=9,
        num_dice=3,
        phase_stack_capacity=20,
        debug=False,
        log_level="INFO",
    )


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def controller(settings: Settings, rng: random.Random) -> TurnController:
    return TurnController(settings, rng=rng)


def advance_to_expression(controller: TurnController, values: tuple[int, ...]) -> None:
    """Roll, replace the dice with ``values``, and confirm with no rerolls."""
    controller.roll()
    controller.turn.dice = DiceSet.from_values(values)
    controller.confirm()
    assert controller.phase is TurnPhase.EXPRESSION


@pytest.fixture
def at_expression():
    """Returns a helper that drives a controller into the expression phase."""
    return advance_to_expression
