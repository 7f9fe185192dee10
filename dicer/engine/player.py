"""
Dicer - Player and Ailments

The player starts with a fixed number of lives and a registry of numbered
ailments (1..N). A turn's result either clears a matching ailment or costs
a life.
"""

from dicer.engine.base import REMOVED_AILMENT_VALUE


class AilmentRegistry:
    """
    Tracks which of N sequential ailment numbers remain active.

    Slot ``i`` holds ``i + 1`` while the ailment is active and
    ``REMOVED_AILMENT_VALUE`` once it has been cleared.
    """

    def __init__(self, count: int) -> None:
        if count < 1:
            raise ValueError(f"At least one ailment required, got {count}.")
        self._slots: list[int] = [number for number in range(1, count + 1)]

    def __len__(self) -> int:
        return len(self._slots)

    @property
    def slots(self) -> tuple[int, ...]:
        return tuple(self._slots)

    def has_any(self) -> bool:
        return any(slot != REMOVED_AILMENT_VALUE for slot in self._slots)

    def is_active(self, number: int) -> bool:
        """True iff ``number`` is in 1..N and not yet removed."""
        if not (1 <= number <= len(self._slots)):
            return False
        return self._slots[number - 1] != REMOVED_AILMENT_VALUE

    def remove(self, number: int) -> None:
        """Clear ailment ``number``. Callers check ``is_active`` first."""
        if not (1 <= number <= len(self._slots)):
            raise ValueError(
                f"Ailment {number} is out of range. Must be between 1 and {len(self._slots)}."
            )
        self._slots[number - 1] = REMOVED_AILMENT_VALUE

    def active_numbers(self) -> tuple[int, ...]:
        return tuple(slot for slot in self._slots if slot != REMOVED_AILMENT_VALUE)

    def status(self) -> tuple[tuple[int, bool], ...]:
        """(number, is_active) for every ailment, in order."""
        return tuple(
            (number, slot != REMOVED_AILMENT_VALUE)
            for number, slot in enumerate(self._slots, start=1)
        )


class Player:
    """Holds the life count and owns the ailment registry."""

    def __init__(self, lives: int, num_ailments: int) -> None:
        self.max_lives = lives
        self.lives = lives
        self.ailments = AilmentRegistry(num_ailments)

    def has_lives(self) -> bool:
        return self.lives > 0

    def remove_life(self) -> None:
        self.lives -= 1

    def __repr__(self) -> str:
        return f"Player(lives={self.lives}, ailments={self.ailments.active_numbers()})"
