"""The two stacks of the puzzle and the eleven instructions that act on them."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def is_sorted(values: Sequence[int]) -> bool:
    """Return True if ``values`` is in non-decreasing order from top to bottom."""
    return all(first <= second for first, second in zip(values, values[1:]))


class PushSwap:
    """Stacks ``a`` and ``b`` plus the log of instructions applied so far.

    Both stacks are lists whose first item is the top. Every instruction
    is recorded in ``ops`` under its name, even when the stack it acts
    on is too short for it to change anything.
    """

    def __init__(self, numbers: Iterable[int]) -> None:
        self.a: list[int] = list(numbers)
        self.b: list[int] = []
        self.ops: list[str] = []

    def __repr__(self) -> str:
        return f"PushSwap(a={self.a!r}, b={self.b!r}, ops={len(self.ops)})"

    @staticmethod
    def _swap(stack: list[int]) -> None:
        if len(stack) >= 2:
            stack[0], stack[1] = stack[1], stack[0]

    @staticmethod
    def _push(src: list[int], dst: list[int]) -> None:
        if src:
            dst.insert(0, src.pop(0))

    @staticmethod
    def _rotate(stack: list[int]) -> None:
        if len(stack) >= 2:
            stack.append(stack.pop(0))

    @staticmethod
    def _reverse_rotate(stack: list[int]) -> None:
        if len(stack) >= 2:
            stack.insert(0, stack.pop())

    def sa(self) -> None:
        """Swap the first two elements of a."""
        self._swap(self.a)
        self.ops.append("sa")

    def sb(self) -> None:
        """Swap the first two elements of b."""
        self._swap(self.b)
        self.ops.append("sb")

    def ss(self) -> None:
        """Swap the tops of both stacks; logs sa and sb before ss."""
        self.sa()
        self.sb()
        self.ops.append("ss")

    def pa(self) -> None:
        """Move the top of b onto a."""
        self._push(self.b, self.a)
        self.ops.append("pa")

    def pb(self) -> None:
        """Move the top of a onto b."""
        self._push(self.a, self.b)
        self.ops.append("pb")

    def ra(self) -> None:
        """The first element of a becomes the last."""
        self._rotate(self.a)
        self.ops.append("ra")

    def rb(self) -> None:
        """The first element of b becomes the last."""
        self._rotate(self.b)
        self.ops.append("rb")

    def rr(self) -> None:
        """ra and rb at the same time."""
        self._rotate(self.a)
        self._rotate(self.b)
        self.ops.append("rr")

    def rra(self) -> None:
        """The last element of a becomes the first."""
        self._reverse_rotate(self.a)
        self.ops.append("rra")

    def rrb(self) -> None:
        """The last element of b becomes the first."""
        self._reverse_rotate(self.b)
        self.ops.append("rrb")

    def rrr(self) -> None:
        """rra and rrb at the same time."""
        self._reverse_rotate(self.a)
        self._reverse_rotate(self.b)
        self.ops.append("rrr")