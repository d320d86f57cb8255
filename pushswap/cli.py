"""Command-line entry point: read integers, sort them, print the operations."""

from __future__ import annotations

import sys
from typing import Sequence

from pushswap.machine import Machine
from pushswap.parsing import InputError, process_input
from pushswap.sorting import is_sorted, sort_stack


def _print_stack(values) -> None:
    for value in values:
        print(f"[] :{value}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program on ``argv`` (the arguments after the program name)."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = process_input(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    if not values:
        sys.stderr.write("error found\n")
        return 1
    machine = Machine(values)
    if not is_sorted(values):
        print("Not yet sorted")
        sys.stdout.flush()
        sort_stack(machine)
    _print_stack(machine.a)
    return 0


if __name__ == "__main__":
    sys.exit(main())