"""Memory usage from /proc/meminfo."""

from __future__ import annotations

import re

from ..util import fmt_human, read_text

MEMINFO = "/proc/meminfo"

_KEYS = ("MemTotal", "MemFree", "MemAvailable", "Buffers", "Cached")


def _read_meminfo(count: int) -> tuple[int, ...] | None:
    """Read the first ``count`` meminfo lines, which must appear in the usual order."""
    text = read_text(MEMINFO)
    if text is None:
        return None
    pattern = "".join(rf"\s*{key}:\s*(\d+)\s*kB" for key in _KEYS[:count])
    match = re.match(pattern, text)
    if match is None:
        return None
    return tuple(int(value) for value in match.groups())


def ram_free(unused: str | None = None) -> str | None:
    """Available memory."""
    values = _read_meminfo(3)
    if values is None:
        return None
    return fmt_human(values[2] * 1024, 1024)


def ram_perc(unused: str | None = None) -> str | None:
    """Used memory in percent, not counting buffers and cache."""
    values = _read_meminfo(5)
    if values is None:
        return None
    total, free, _available, buffers, cached = values
    if total == 0:
        return None
    return str(100 * ((total - free) - (buffers + cached)) // total)


def ram_total(unused: str | None = None) -> str | None:
    """Total memory."""
    values = _read_meminfo(1)
    if values is None:
        return None
    return fmt_human(values[0] * 1024, 1024)


def ram_used(unused: str | None = None) -> str | None:
    """Used memory, not counting buffers and cache."""
    values = _read_meminfo(5)
    if values is None:
        return None
    total, free, _available, buffers, cached = values
    return fmt_human((total - free - buffers - cached) * 1024, 1024)