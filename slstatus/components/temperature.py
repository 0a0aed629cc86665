"""Temperature from a thermal sensor file."""

from __future__ import annotations

from ..util import read_int


def temp(file: str) -> str | None:
    """Whole degrees Celsius from a sensor file holding millidegrees."""
    value = read_int(file)
    if value is None:
        return None
    return str(value // 1000)