"""First line of an arbitrary file."""

from __future__ import annotations

from ..util import BUFSIZE, warn


def cat(path: str) -> str | None:
    """Return the first line of ``path`` without its newline, or None if empty."""
    try:
        with open(path, encoding="utf-8", errors="replace") as fp:
            line = fp.readline(BUFSIZE - 2)
    except OSError as error:
        warn(f"fopen '{path}'", error)
        return None

    if line.endswith("\n"):
        line = line[:-1]
    return line or None