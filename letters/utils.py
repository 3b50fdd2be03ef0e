"""Small file helpers."""

from __future__ import annotations

import os


def file2str(filename: str | os.PathLike[str]) -> str:
    """Return the whole contents of a file, or an empty string if it cannot be read."""
    try:
        with open(filename, encoding="utf-8", newline="") as handle:
            return handle.read()
    except OSError:
        return ""