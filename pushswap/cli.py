"""Command-line entry point: print the moves that sort the given integers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.args import InputError, parse_arguments
from pushswap.sorting import solve


def main(argv: Sequence[str] | None = None) -> int:
    """Read integers from ``argv`` and write one move per line to stdout.

    Invalid input writes ``Error`` to stderr. The exit status is always 0.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 0
    if not values:
        return 0
    sys.stdout.write("".join(f"{move}\n" for move in solve(values)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())