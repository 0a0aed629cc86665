"""System load averages."""

from __future__ import annotations

import os

from ..util import warn


def load_avg(unused: str | None = None) -> str | None:
    """The 1, 5 and 15 minute load averages with two decimals each."""
    try:
        one, five, fifteen = os.getloadavg()
    except OSError:
        warn("getloadavg: Failed to obtain load average")
        return None
    return f"{one:.2f} {five:.2f} {fifteen:.2f}"