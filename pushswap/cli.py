"""Command line: print the operations that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.parsing import PushSwapError, parse_arguments
from pushswap.sorter import solve
from pushswap.stack import has_duplicates


def main(argv: Sequence[str] | None = None) -> int:
    """Read numbers from the arguments and print one operation per line."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        values = parse_arguments(args)
        if not values or has_duplicates(values):
            raise PushSwapError()
    except PushSwapError:
        sys.stderr.write("error\n")
        return 1
    sys.stdout.write("".join(f"{op}\n" for op in solve(values)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())