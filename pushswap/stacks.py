"""The two stacks of the puzzle and the moves that act on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass
class Item:
    """One number on a stack, with its rank in sorted order once known."""

    value: int
    rank: int = -1


class Stacks:
    """Stacks ``a`` and ``b``; index 0 of each deque is the top.

    Every move that changes a stack is appended to :attr:`moves` under its
    conventional name. A move that cannot apply leaves everything unchanged
    and records nothing.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self.a: deque[Item] = deque(Item(value) for value in values)
        self.b: deque[Item] = deque()
        self.moves: list[str] = []

    @property
    def a_values(self) -> list[int]:
        """Values of stack ``a`` from top to bottom."""
        return [item.value for item in self.a]

    @property
    def b_values(self) -> list[int]:
        """Values of stack ``b`` from top to bottom."""
        return [item.value for item in self.b]

    def _swap(self, stack: deque[Item], name: str) -> None:
        if len(stack) > 1:
            stack[0], stack[1] = stack[1], stack[0]
            self.moves.append(name)

    def _rotate(self, stack: deque[Item], name: str) -> None:
        if len(stack) > 1:
            stack.append(stack.popleft())
            self.moves.append(name)

    def _reverse_rotate(self, stack: deque[Item], name: str) -> None:
        if len(stack) > 1:
            stack.appendleft(stack.pop())
            self.moves.append(name)

    def _push(self, source: deque[Item], target: deque[Item], name: str) -> None:
        if source:
            target.appendleft(source.popleft())
            self.moves.append(name)

    def sa(self) -> None:
        """Swap the two top items of ``a``."""
        self._swap(self.a, "sa")

    def sb(self) -> None:
        """Swap the two top items of ``b``."""
        self._swap(self.b, "sb")

    def ra(self) -> None:
        """Move the top item of ``a`` to its bottom."""
        self._rotate(self.a, "ra")

    def rb(self) -> None:
        """Move the top item of ``b`` to its bottom."""
        self._rotate(self.b, "rb")

    def rra(self) -> None:
        """Move the bottom item of ``a`` to its top."""
        self._reverse_rotate(self.a, "rra")

    def rrb(self) -> None:
        """Move the bottom item of ``b`` to its top."""
        self._reverse_rotate(self.b, "rrb")

    def pa(self) -> None:
        """Move the top item of ``b`` onto ``a``."""
        self._push(self.b, self.a, "pa")

    def pb(self) -> None:
        """Move the top item of ``a`` onto ``b``."""
        self._push(self.a, self.b, "pb")

    def is_sorted(self) -> bool:
        """Whether ``a`` never decreases from top to bottom."""
        values = self.a_values
        return all(upper <= lower for upper, lower in zip(values, values[1:]))