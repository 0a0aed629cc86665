"""Shared helpers: diagnostics, human-readable sizes and small file readers."""

from __future__ import annotations

import re
import sys
from typing import NoReturn

# interval between updates (in ms)
INTERVAL = 1000
# text to show if no value can be retrieved
UNKNOWN_STR = "n/a"
# maximum output string length
MAXLEN = 2048
# size of the buffer a single component result must fit in
BUFSIZE = 1024

_PREFIXES = {
    1000: ("", "k", "M", "G", "T", "P", "E", "Z", "Y"),
    1024: ("", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi"),
}

_INT_RE = re.compile(r"\s*([+-]?\d+)")


def warn(message: str, error: BaseException | None = None) -> None:
    """Print a diagnostic to stderr, followed by the error's description if given."""
    if error is not None:
        detail = getattr(error, "strerror", None) or str(error)
        print(f"{message}: {detail}", file=sys.stderr)
    else:
        print(message, file=sys.stderr)


def die(message: str, error: BaseException | None = None) -> NoReturn:
    """Print a diagnostic and exit with status 1."""
    warn(message, error)
    raise SystemExit(1)


def fmt_human(num: int | float, base: int) -> str:
    """Format a number scaled by powers of ``base`` (1000 or 1024) with one decimal."""
    try:
        prefixes = _PREFIXES[base]
    except KeyError:
        raise ValueError(f"fmt_human: invalid base {base}") from None

    scaled = float(num)
    index = 0
    while index < len(prefixes) - 1 and scaled >= base:
        scaled /= base
        index += 1
    return f"{scaled:.1f} {prefixes[index]}"


def read_text(path: str) -> str | None:
    """Return the contents of a text file, or None (with a warning) if it cannot be read."""
    try:
        with open(path, encoding="utf-8", errors="replace") as fp:
            return fp.read()
    except OSError as error:
        warn(f"fopen '{path}'", error)
        return None


def read_int(path: str) -> int | None:
    """Return the leading integer of a file, or None if missing or unparsable."""
    text = read_text(path)
    if text is None:
        return None
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else None