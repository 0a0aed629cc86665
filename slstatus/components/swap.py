"""Swap usage from /proc/meminfo."""

from __future__ import annotations

import re

from ..util import fmt_human, warn

MEMINFO = "/proc/meminfo"

_VALUE_RE = re.compile(r"\s*([+-]?\d+)")


def _swap_info(*names: str) -> tuple[int, ...] | None:
    """Read the named Swap* fields, in kB."""
    values: dict[str, int | None] = {}
    try:
        with open(MEMINFO, encoding="ascii", errors="replace") as fp:
            for line in fp:
                if len(values) == len(names):
                    break
                for name in names:
                    if name not in values and line.startswith(name):
                        match = _VALUE_RE.match(line, len(name) + 1)
                        values[name] = int(match.group(1)) if match else None
                        break
    except OSError as error:
        warn(f"fopen '{MEMINFO}'", error)
        return None

    if len(values) != len(names) or None in values.values():
        return None
    return tuple(values[name] for name in names)


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def swap_free(unused: str | None = None) -> str | None:
    """Free swap."""
    info = _swap_info("SwapFree")
    if info is None:
        return None
    return fmt_human(info[0] * 1024, 1024)


def swap_perc(unused: str | None = None) -> str | None:
    """Used swap in percent, not counting swap cache."""
    info = _swap_info("SwapTotal", "SwapFree", "SwapCached")
    if info is None:
        return None
    total, free, cached = info
    if total == 0:
        return None
    return str(_trunc_div(100 * (total - free - cached), total))


def swap_total(unused: str | None = None) -> str | None:
    """Total swap."""
    info = _swap_info("SwapTotal")
    if info is None:
        return None
    return fmt_human(info[0] * 1024, 1024)


def swap_used(unused: str | None = None) -> str | None:
    """Used swap, not counting swap cache."""
    info = _swap_info("SwapTotal", "SwapFree", "SwapCached")
    if info is None:
        return None
    total, free, cached = info
    return fmt_human((total - free - cached) * 1024, 1024)