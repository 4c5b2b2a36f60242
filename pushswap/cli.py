"""Command that prints the operations sorting its arguments."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .parsing import InputError, parse_stack
from .sorter import solve


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print one operation per line; print ``Error`` and return 1 on bad input."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        operations = solve(parse_stack(args))
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("".join(f"{operation}\n" for operation in operations))
    return 0


if __name__ == "__main__":
    sys.exit(main())