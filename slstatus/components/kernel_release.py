"""Kernel release, as printed by `uname -r`."""

from __future__ import annotations

import os

from ..util import warn


def kernel_release(unused: str | None = None) -> str | None:
    """The running kernel's release string."""
    try:
        return os.uname().release
    except OSError as error:
        warn("uname", error)
        return None