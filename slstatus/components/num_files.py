"""Number of entries in a directory."""

from __future__ import annotations

import os

from ..util import warn


def num_files(path: str) -> str | None:
    """Count the entries of ``path``, not counting '.' and '..'."""
    try:
        with os.scandir(path) as entries:
            count = sum(1 for _ in entries)
    except OSError as error:
        warn(f"opendir '{path}'", error)
        return None
    return str(count)