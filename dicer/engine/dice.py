"""
Dicer - Dice

A Die holds one D6 face value (None until its first roll). A DiceSet is the
fixed-size, ordered collection of dice owned by one turn: values change in
place on a roll or reroll, but the set is never resized.
"""

import random
from typing import Iterable, Iterator, Sequence

from dicer.engine.base import DIE_FACES
from dicer.engine.validators import validate_dice_indices, validate_dice_values


class Die:
    """A single rollable D6."""

    __slots__ = ("value",)

    def __init__(self, value: int | None = None) -> None:
        self.value = value

    def roll(self, rng: random.Random | None = None) -> int:
        """Overwrite the value with a fresh uniform draw in [1, 6]."""
        source = rng if rng is not None else random
        self.value = source.randint(1, DIE_FACES)
        return self.value

    def __repr__(self) -> str:
        return f"Die({self.value!r})"


class DiceSet:
    """
    Fixed-size ordered collection of dice.

    Attributes:
        dice: The dice, in display order
    """

    def __init__(self, count: int, rng: random.Random | None = None) -> None:
        if count < 1:
            raise ValueError(f"A dice set needs at least one die, got {count}.")
        self._rng = rng
        self.dice: tuple[Die, ...] = tuple(Die() for _ in range(count))

    @classmethod
    def from_values(
        cls,
        values: Sequence[int],
        rng: random.Random | None = None,
    ) -> "DiceSet":
        """Create an already-rolled DiceSet (for replays and tests)."""
        validated = validate_dice_values(values)
        dice_set = cls(len(validated), rng=rng)
        for die, value in zip(dice_set.dice, validated):
            die.value = value
        return dice_set

    @property
    def values(self) -> tuple[int, ...]:
        """Current face values. Empty until every die has been rolled."""
        if not self.is_rolled:
            return tuple()
        return tuple(die.value for die in self.dice)

    @property
    def is_rolled(self) -> bool:
        return all(die.value is not None for die in self.dice)

    def roll_all(self) -> tuple[int, ...]:
        for die in self.dice:
            die.roll(self._rng)
        return self.values

    def reroll_selected(self, indices: Iterable[int]) -> tuple[int, ...]:
        """Reroll only the dice at the given indices.

        Raises:
            ValueError: If any index is outside [0, len)
        """
        for index in sorted(validate_dice_indices(indices, len(self.dice))):
            self.dice[index].roll(self._rng)
        return self.values

    def __len__(self) -> int:
        return len(self.dice)

    def __getitem__(self, index: int) -> int | None:
        return self.dice[index].value

    def __iter__(self) -> Iterator[int | None]:
        return (die.value for die in self.dice)

    def __repr__(self) -> str:
        return f"DiceSet({[die.value for die in self.dice]!r})"
