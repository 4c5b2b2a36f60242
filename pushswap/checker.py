"""Command that checks whether a list of instructions sorts the stack."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, Sequence, Union

from .libft.line_reader import LineReader
from .operations import Stacks
from .parsing import InputError, parse_stack


def run_instructions(stacks: Stacks, lines: Iterable[Union[str, bytes]]) -> None:
    """Apply each newline-terminated instruction in turn.

    Raises InputError at the first line that is not exactly an
    instruction followed by a newline; earlier lines stay applied.
    """
    for line in lines:
        if isinstance(line, bytes):
            line = line.decode("latin-1")
        if not line.endswith("\n"):
            raise InputError(f"bad instruction: {line!r}")
        try:
            stacks.apply(line[:-1])
        except ValueError:
            raise InputError(f"bad instruction: {line!r}") from None


def check(values: Iterable[int], lines: Iterable[Union[str, bytes]]) -> bool:
    """True if the instructions leave ``values`` sorted with ``b`` empty."""
    stacks = Stacks(values)
    run_instructions(stacks, lines)
    return stacks.is_solved()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read instructions from standard input and print ``OK`` or ``KO``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        values = parse_stack(args)
        solved = check(values, LineReader(sys.stdin))
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("OK\n" if solved else "KO\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())