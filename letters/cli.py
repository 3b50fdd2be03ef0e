"""Command-line entry point of the Letters compiler."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from letters.utils import file2str


def main(argv: Sequence[str] | None = None) -> int:
    """Read the single source file named on the command line.

    Returns 0 on success and 1 when the arguments are not exactly one file name.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("invalid command-line options", file=sys.stderr)
        return 1

    file2str(args[0])
    return 0


if __name__ == "__main__":
    sys.exit(main())