# pushswap

Sort a list of integers on two stacks, `a` and `b`, using a fixed set of
named operations. Each operation that is performed is printed by name, one
per line, followed by the final contents of stack `a`.

## Installation

```
pip install .
```

## Usage

Pass the numbers as separate arguments:

```
push-swap 3 1 2
```

or as one quoted, space-separated string:

```
push-swap "3 1 2"
```

Input rules:

- Each number may be preceded by tab, newline, vertical-tab, form-feed or
  carriage-return characters and by one `+` or `-` sign. Every other
  character must be a digit. Values are truncated to 32-bit signed integers.
- Duplicate values are rejected.
- On bad input the program writes `Error` to standard error and exits with
  status 1.
- If a single quoted argument holds no numbers at all, it writes
  `error found` to standard error and exits with status 1.
- With no arguments it does nothing and exits with status 0.

Output:

- If the numbers are already in ascending order, no operations are printed.
- Otherwise `Not yet sorted` is printed, followed by the operations.
- Finally each value left in stack `a` is printed, top first, as `[] :<value>`.

For example, `push-swap 3 1 2` prints:

```
Not yet sorted
ra
[] :1
[] :2
[] :3
```

## Operations

| Name  | Effect                                         |
|-------|------------------------------------------------|
| `sa`  | swap the top two elements of `a`               |
| `sb`  | swap the top two elements of `b`               |
| `ss`  | `sa` and `sb` together                         |
| `pa`  | move the top of `b` onto `a`                   |
| `pb`  | move the top of `a` onto `b`                   |
| `ra`  | rotate `a` up: the top goes to the bottom      |
| `rb`  | rotate `b` up                                  |
| `rr`  | `ra` and `rb` together                         |
| `rra` | rotate `a` down: the bottom goes to the top    |
| `rrb` | rotate `b` down                                |
| `rrr` | `rra` and `rrb` together                       |

An operation that has nothing to move (for example `pa` with `b` empty) still
prints its name.

## Limitations

Only inputs of two or three numbers are sorted. A longer unsorted list is
reported as `Not yet sorted` and printed back unchanged, with no operations.

## Library use

```python
import io
from pushswap.machine import Machine
from pushswap.sorting import sort_stack

out = io.StringIO()
machine = Machine([3, 1, 2], out)
sort_stack(machine)
print(out.getvalue())   # "ra\n"
print(list(machine.a))  # [1, 2, 3]
```

- `pushswap.machine.Machine(values, out)` holds stacks `a` and `b` as deques
  (top at the left) and has one method per operation above; each writes its
  name to `out`, or to standard output when `out` is None.
- `pushswap.sorting` provides `is_sorted`, `find_top`, `sort_three` and
  `sort_stack`.
- `pushswap.parsing.process_input(args)` turns command-line arguments into a
  list of integers and raises `pushswap.parsing.InputError` on an invalid
  number or a duplicate; `parse_int` and `check_duplicates` are also available.
- `pushswap.cli.main(argv=None)` runs the command and returns its exit status.

The package also contains small helper modules: `pushswap.chars` (character
classes, `atoi`, `itoa`), `pushswap.strings` (C-style string functions such as
`split`, `substr`, `strtrim`, `strlcpy`), `pushswap.memory` (byte-buffer
functions such as `memset`, `memcmp`, `memmove`), `pushswap.linked`
(`LinkedList` and `Node`) and `pushswap.output` (`put_char`, `put_str`,
`put_endl`, `put_nbr`).

## Tests

```
pip install .[test]
pytest
```