"""Caps lock and num lock indicators."""

from __future__ import annotations

from ..util import warn
from ..xdisplay import DisplayError, open_display

CAPS_LOCK = 1
NUM_LOCK = 2


def render_indicators(fmt: str, led_mask: int) -> str:
    """Render ``fmt`` for the given LED mask.

    ``fmt`` holds 'c' (caps lock) and/or 'n' (num lock) in either case, each
    optionally followed by '?'. With '?', the letter is shown as written only
    when the indicator is on; without it, the letter is always shown,
    lowercase when off and uppercase when on. Only the first four characters
    count.
    """
    fmt = fmt[:4]
    out = []
    for char, following in zip(fmt, fmt[1:] + "\0"):
        key = char.lower()
        if key not in ("c", "n"):
            continue
        isset = bool(led_mask & (NUM_LOCK if key == "n" else CAPS_LOCK))
        if following != "?":
            out.append(key.upper() if isset else key)
        elif isset:
            out.append(char)
    return "".join(out)


def keyboard_indicators(fmt: str) -> str | None:
    """Indicator string for the current keyboard state."""
    try:
        with open_display() as conn:
            led_mask = conn.keyboard_led_mask()
    except DisplayError as error:
        warn("XOpenDisplay: Failed to open display", error)
        return None
    return render_indicators(fmt, led_mask)