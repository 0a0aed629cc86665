"""Local date and time."""

from __future__ import annotations

import time

from ..util import BUFSIZE, warn


def datetime(fmt: str) -> str | None:
    """Format the current local time with a strftime format."""
    result = time.strftime(fmt, time.localtime())
    if not result or len(result) >= BUFSIZE:
        warn("strftime: Result string exceeds buffer size")
        return None
    return result