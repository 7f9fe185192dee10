"""Dicer - roll the dice, write the expression, cure what ails you."""

__version__ = "0.1.0"
