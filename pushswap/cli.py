"""Command-line entry point: print the instructions that sort the arguments."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.parsing import InputError, parse_arguments
from pushswap.sorting import push_swap


def main(argv: Sequence[str] | None = None) -> int:
    """Validate the arguments, print one instruction per line and return the exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        numbers = parse_arguments(args)
    except InputError as err:
        sys.stdout.write(err.kind.message + "\n")
        return 1
    for op in push_swap(numbers):
        sys.stdout.write(op + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())