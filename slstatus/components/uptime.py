"""System uptime."""

from __future__ import annotations

import time

from ..util import warn

UPTIME_CLOCK = next(
    getattr(time, name)
    for name in ("CLOCK_BOOTTIME", "CLOCK_UPTIME", "CLOCK_MONOTONIC")
    if hasattr(time, name)
)


def uptime(unused: str | None = None) -> str | None:
    """Time since boot as 'Hh Mm'."""
    try:
        seconds = int(time.clock_gettime(UPTIME_CLOCK))
    except OSError:
        warn(f"clock_gettime {UPTIME_CLOCK}")
        return None
    hours, rest = divmod(seconds, 3600)
    return f"{hours}h {rest // 60}m"