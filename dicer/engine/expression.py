"""
Dicer - Expression Conversion and Evaluation

Infix expressions are whitespace-delimited token streams, e.g.
``"( 7 + 5 ) * ( 6 / 2 )"``. They are rewritten to postfix with the
shunting-yard algorithm and evaluated on a value stack using integer
arithmetic (division truncates toward zero).

Example:
    >>> infix_to_postfix("( 3 + 3 ) * 1")
    '3 3 + 1 *'
    >>> evaluate_postfix("3 3 + 1 *")
    6
"""

import operator
from typing import Callable

from dicer.engine.base import (
    BRACKET_PAIRS,
    CLOSING_BRACKETS,
    OPENING_BRACKETS,
    OPERATORS,
    ExpressionDivisionError,
    UnbalancedExpressionError,
)
from dicer.engine.stack import Stack


def _truncating_divide(left: int, right: int) -> int:
    if right == 0:
        raise ExpressionDivisionError(f"Cannot divide {left} by zero.")
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


_APPLY: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_divide,
}


def is_operator(token: str) -> bool:
    return token in OPERATORS


def is_operand(token: str) -> bool:
    try:
        int(token)
    except ValueError:
        return False
    return True


def precedence(token: str) -> int:
    """Binding strength of an operator; 0 for anything else."""
    return OPERATORS.get(token, 0)


def is_balanced(expression: str) -> bool:
    """
    Check that every bracket is closed by its own kind, in order.

    ``()``, ``[]`` and ``{}`` are all accepted; other characters are ignored.
    """
    openers: Stack[str] = Stack()

    for char in expression:
        if char in OPENING_BRACKETS:
            openers.push(char)
        elif char in CLOSING_BRACKETS:
            if openers.is_empty() or openers.top() != BRACKET_PAIRS[char]:
                return False
            openers.pop()

    return openers.is_empty()


def is_space_delimited(expression: str) -> bool:
    """True when no two adjacent characters are both non-space."""
    for previous, current in zip(expression, expression[1:]):
        if previous != " " and current != " ":
            return False
    return True


def infix_to_postfix(expression: str) -> str:
    """
    Convert a whitespace-delimited infix expression to postfix.

    Any bracket kind groups. Operators of equal precedence are emitted in
    scan order, which makes every supported operator left-associative.
    Tokens that are neither operands, operators nor brackets are dropped.
    """
    pending: Stack[str] = Stack()
    output: list[str] = []

    for token in expression.split():
        if is_operand(token):
            output.append(token)
        elif is_operator(token):
            while (
                not pending.is_empty()
                and pending.top() not in OPENING_BRACKETS
                and precedence(pending.top()) >= precedence(token)
            ):
                output.append(pending.top())
                pending.pop()
            pending.push(token)
        elif token in OPENING_BRACKETS:
            pending.push(token)
        elif token in CLOSING_BRACKETS:
            while not pending.is_empty() and pending.top() not in OPENING_BRACKETS:
                output.append(pending.top())
                pending.pop()
            # Discard the opener
            pending.pop()

    while not pending.is_empty():
        output.append(pending.top())
        pending.pop()

    return " ".join(output)


def evaluate_postfix(expression: str) -> int:
    """
    Evaluate a whitespace-delimited postfix expression.

    Raises:
        UnbalancedExpressionError: If an operator lacks two operands or
            nothing is left on the stack at the end
        ExpressionDivisionError: On division by zero
    """
    values: Stack[int] = Stack()

    for token in expression.split():
        if is_operand(token):
            values.push(int(token))
        elif is_operator(token):
            if len(values) < 2:
                raise UnbalancedExpressionError(
                    f"Operator '{token}' needs two operands."
                )
            right = values.top()
            values.pop()
            left = values.top()
            values.pop()
            values.push(_APPLY[token](left, right))

    if values.is_empty():
        raise UnbalancedExpressionError("Expression produced no value.")
    return values.top()


def evaluate_expression(expression: str) -> int:
    """Convert an infix expression to postfix and evaluate it."""
    return evaluate_postfix(infix_to_postfix(expression))
