"""Sorting stack a of a Machine with the push_swap instruction set."""

from __future__ import annotations

from typing import Sequence

from pushswap.machine import Machine


def is_sorted(values: Sequence[int]) -> bool:
    """True when no value is greater than a value that comes after it."""
    return all(earlier <= later for earlier, later in zip(values, values[1:]))


def find_top(values: Sequence[int]) -> int:
    """The largest value; raises ValueError when there are none."""
    if not values:
        raise ValueError("cannot find the top of an empty stack")
    return max(values)


def sort_three(machine: Machine) -> None:
    """Sort a three-element stack a with at most two operations."""
    top = find_top(machine.a)
    if machine.a[0] == top:
        machine.ra()
    elif machine.a[1] == top:
        machine.rra()
    if not is_sorted(list(machine.a)):
        machine.sa()


def sort_stack(machine: Machine) -> None:
    """Sort stack a when it holds two or three values.

    Two values are always swapped; other sizes are left as they are.
    """
    size = len(machine.a)
    if size == 2:
        machine.sa()
    elif size == 3:
        sort_three(machine)