"""Command line entry point: print the moves that sort the given integers."""

from __future__ import annotations

import sys
from typing import Sequence

from .parsing import InputError, parse_arguments
from .sorter import solve


def main(argv: Sequence[str] | None = None) -> int:
    """Print one move per line; report bad input as ``Error`` on stderr."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or (len(args) == 1 and not args[0]):
        return 1
    try:
        numbers = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("".join(f"{move}\n" for move in solve(numbers)))
    return 0


if __name__ == "__main__":
    sys.exit(main())