# pushswap

This package sorts a list of distinct integers with two stacks, `a` and `b`.
Only the following operations are allowed:

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of a, b, or both |
| `pa`, `pb` | move the top of b onto a, or the top of a onto b |
| `ra`, `rb`, `rr` | rotate a, b, or both up by one (top goes to bottom) |
| `rra`, `rrb`, `rrr` | rotate a, b, or both down by one (bottom goes to top) |

An operation does nothing when its stack has too few elements to act on.

## Installation

```
pip install .
```

The package needs no third-party libraries. Install the test extra with
`pip install .[test]`.

## Producing a solution

```
push-swap 3 2 1 5 4
push-swap "3 2 1" 5 4
```

`push-swap` takes its numbers from the command-line arguments. One argument
may hold several numbers separated by spaces. The first number goes on top of
stack `a`. The command prints one operation per line. Once those operations
have run, `a` holds every number in ascending order and `b` is empty. If the
input is already sorted, or holds a single number, nothing is printed.

A number may have one leading `+` or `-`. The command writes `Error` to
standard error and exits with status 1 in any of these cases:

- an argument is an empty string, or the arguments contain no numbers at all;
- a token is not an optionally signed run of decimal digits;
- a value lies outside the 32-bit signed range;
- a value appears more than once.

With no arguments it prints nothing and exits with status 0.

## Checking a solution

```
push-swap 3 2 1 | push-swap-checker 3 2 1
```

`push-swap-checker` takes the same arguments as `push-swap`. It reads
operations from standard input, one per line, and applies them. It then prints:

- `OK` if `a` is sorted and `b` is empty;
- `KO` otherwise.

The checker writes `Error` to standard error and exits with status 1 in two
cases:

- the arguments are invalid, for the same reasons listed above;
- an input line is not exactly an operation name followed by a newline. This
  includes a final line with no newline.

With no arguments it reads nothing and exits with status 0.

## Library use

```python
from pushswap.sorter import solve
from pushswap.checker import check
from pushswap.operations import Stacks, Operation
from pushswap.parsing import parse_stack, InputError

values = parse_stack(["3 2 1", "5", "4"])   # [3, 2, 1, 5, 4]
moves = solve(values)                       # list of Operation
print(check(values, (f"{move}\n" for move in moves)))   # True

stacks = Stacks([2, 1])
stacks.apply(Operation.SA)     # names such as "sa" work too
print(stacks.a, stacks.history, stacks.is_solved())
```

### `pushswap.operations`

- `Operation` is a string enum of the eleven operations.
- `Stacks` holds the two stacks as deques, with the top at index 0.
- `Stacks.apply` performs one operation and records it in `history`. It
  raises `ValueError` for an unknown name.

### `pushswap.parsing`

- `parse_stack` turns command-line style arguments into a list of integers.
- `split_arguments` joins the arguments and splits them on spaces.
- `parse_int` reads one integer the way `atoi` does, within the 32-bit range.

These functions raise `InputError`, a subclass of `ValueError`, on bad input.

### `pushswap.sorter`

- `solve` returns the operations that sort a list of values.
- `sort_stacks` sorts a `Stacks` in place and returns the operations it used.
- `sort_three`, `push_back_cheapest`, `sort_almost_sorted` and `is_sorted` are
  the steps the sort is built from.

### `pushswap.checker`

- `run_instructions` applies newline-terminated instruction lines to a
  `Stacks`.
- `check` returns whether the lines leave the values sorted with `b` empty.

## Helpers

The `pushswap.libft` subpackage holds small helpers:

- `chars` classifies ASCII characters and maps their case: `is_alpha`,
  `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_lower` and `to_upper`.
- `text` converts and reshapes strings: `atoi`, `itoa`, `split`, `join`,
  `trim`, `substring`, `duplicate`, `iter_indexed` and `map_indexed`.
- `search` treats strings as NUL-terminated: `string_length`, `find_char`,
  `rfind_char`, `find_within`, `compare_prefix`, `copy_bounded` and
  `concat_bounded`.
- `memory` works on byte buffers: `zero`, `allocate_zeroed`, `find_byte`,
  `compare_bytes`, `copy_bytes`, `move_bytes` and `fill_bytes`.
- `linked_list` provides `Node` and `LinkedList`. `LinkedList` supports
  `push_front`, `push_back`, `last`, `clear`, `for_each` and `map`.
- `line_reader` provides `LineReader(stream, buffer_size=10)`. It yields lines
  from a text or binary stream through a fixed-size buffer.
- `output` writes to a text stream, standard output by default: `put_char`,
  `put_str`, `put_endl` and `put_number`.
- `printf` has `format_printf` and `printf`. They support `%c`, `%s`, `%p`,
  `%d`, `%i`, `%u`, `%x`, `%X` and `%%`. For example,
  `format_printf("%d is %x", 255, 255)` gives `"255 is ff"`.