"""Available kernel entropy."""

from __future__ import annotations

import sys

from ..util import read_int

ENTROPY_AVAIL = "/proc/sys/kernel/random/entropy_avail"


def entropy(unused: str | None = None) -> str | None:
    """Entropy pool size; infinite on the BSDs."""
    if sys.platform.startswith(("openbsd", "freebsd")):
        return "\u221e"
    num = read_int(ENTROPY_AVAIL)
    return None if num is None else str(num)