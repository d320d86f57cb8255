"""The two-stack machine that push_swap operations run on."""

from __future__ import annotations

from collections import deque
from typing import Iterable, TextIO

from pushswap.output import put_str


class Machine:
    """Stacks ``a`` and ``b`` with the push_swap instruction set.

    The top of each stack is the left end of its deque.  Every operation
    writes its name, followed by a newline, to ``out`` (standard output by
    default), whether or not it moved anything.
    """

    def __init__(self, values: Iterable[int] = (), out: TextIO | None = None) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.out = out

    def __repr__(self) -> str:
        return f"Machine(a={list(self.a)!r}, b={list(self.b)!r})"

    def _emit(self, name: str) -> None:
        put_str(f"{name}\n", self.out)

    @staticmethod
    def _swap(stack: deque[int]) -> None:
        if len(stack) >= 2:
            first = stack.popleft()
            stack.insert(1, first)

    @staticmethod
    def _rotate(stack: deque[int]) -> None:
        if len(stack) >= 2:
            stack.rotate(-1)

    @staticmethod
    def _rrotate(stack: deque[int]) -> None:
        if len(stack) >= 2:
            stack.rotate(1)

    @staticmethod
    def _push(src: deque[int], dst: deque[int]) -> None:
        if src:
            dst.appendleft(src.popleft())

    def sa(self) -> None:
        """Swap the top two elements of a."""
        self._swap(self.a)
        self._emit("sa")

    def sb(self) -> None:
        """Swap the top two elements of b."""
        self._swap(self.b)
        self._emit("sb")

    def ss(self) -> None:
        """Swap the top two elements of both stacks."""
        self._swap(self.a)
        self._swap(self.b)
        self._emit("ss")

    def ra(self) -> None:
        """Move the top of a to its bottom."""
        self._rotate(self.a)
        self._emit("ra")

    def rb(self) -> None:
        """Move the top of b to its bottom."""
        self._rotate(self.b)
        self._emit("rb")

    def rr(self) -> None:
        """Rotate both stacks."""
        self._rotate(self.a)
        self._rotate(self.b)
        self._emit("rr")

    def rra(self) -> None:
        """Move the bottom of a to its top."""
        self._rrotate(self.a)
        self._emit("rra")

    def rrb(self) -> None:
        """Move the bottom of b to its top."""
        self._rrotate(self.b)
        self._emit("rrb")

    def rrr(self) -> None:
        """Reverse-rotate both stacks."""
        self._rrotate(self.a)
        self._rrotate(self.b)
        self._emit("rrr")

    def pa(self) -> None:
        """Move the top of b onto a; nothing moves when b is empty."""
        self._push(self.b, self.a)
        self._emit("pa")

    def pb(self) -> None:
        """Move the top of a onto b; nothing moves when a is empty."""
        self._push(self.a, self.b)
        self._emit("pb")