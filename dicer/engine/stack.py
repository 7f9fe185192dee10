"""
Dicer - Bounded Stack

LIFO container used for turn phases and by the expression algorithms.
Capacity is optional; when set, pushing past it raises StackFullError.
"""

from typing import Generic, Iterator, TypeVar

from dicer.engine.base import StackEmptyError, StackFullError, TurnPhase

T = TypeVar("T")

MAX_STACK_SIZE = 20


class Stack(Generic[T]):
    """
    List-backed LIFO with an optional capacity bound.

    ``pop`` on an empty stack is a no-op; ``top`` on an empty stack raises.
    """

    def __init__(self, capacity: int | None = None) -> None:
        if capacity is not None and capacity < 1:
            raise ValueError(f"Stack capacity must be positive, got {capacity}.")
        self._capacity = capacity
        self._items: list[T] = []

    @property
    def capacity(self) -> int | None:
        return self._capacity

    def push(self, item: T) -> None:
        if self._capacity is not None and len(self._items) >= self._capacity:
            raise StackFullError(f"Stack is full (capacity {self._capacity}).")
        self._items.append(item)

    def pop(self) -> None:
        if self._items:
            self._items.pop()

    def top(self) -> T:
        if not self._items:
            raise StackEmptyError("Stack is empty.")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from top to bottom."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r}, capacity={self._capacity})"


class PhaseStack(Stack[TurnPhase]):
    """Stack of turn phases, always bounded."""

    def __init__(self, capacity: int = MAX_STACK_SIZE) -> None:
        super().__init__(capacity=capacity)
