"""Battery percentage, charging state and remaining time from power_supply sysfs."""

from __future__ import annotations

import os
import re

from ..util import read_int, read_text

POWER_SUPPLY_DIR = "/sys/class/power_supply"

_STATE_RE = re.compile(r"[A-Za-z ]{1,12}")

_STATE_SYMBOLS = {
    "Charging": "+",
    "Discharging": "-",
    "Full": "o",
    "Not charging": "o",
}


def _path(bat: str, name: str) -> str:
    return os.path.join(POWER_SUPPLY_DIR, bat, name)


def _read_state(bat: str) -> str | None:
    text = read_text(_path(bat, "status"))
    if text is None:
        return None
    match = _STATE_RE.match(text)
    return match.group() if match else None


def _pick(bat: str, *names: str) -> str | None:
    """Return the first readable attribute path among ``names``."""
    for name in names:
        path = _path(bat, name)
        if os.access(path, os.R_OK):
            return path
    return None


def battery_perc(bat: str) -> str | None:
    """Battery capacity in percent."""
    capacity = read_int(_path(bat, "capacity"))
    return None if capacity is None else str(capacity)


def battery_state(bat: str) -> str | None:
    """'+' when charging, '-' when discharging, 'o' when full, '?' otherwise."""
    state = _read_state(bat)
    if state is None:
        return None
    return _STATE_SYMBOLS.get(state, "?")


def battery_remaining(bat: str) -> str | None:
    """Remaining time as 'Hh Mm' while discharging, '' otherwise."""
    state = _read_state(bat)
    if state is None:
        return None

    charge_path = _pick(bat, "charge_now", "energy_now")
    if charge_path is None:
        return None
    charge_now = read_int(charge_path)
    if charge_now is None:
        return None

    if state != "Discharging":
        return ""

    current_path = _pick(bat, "current_now", "power_now")
    if current_path is None:
        return None
    current_now = read_int(current_path)
    if not current_now:
        return None

    timeleft = charge_now / current_now
    hours = int(timeleft)
    minutes = int((timeleft - hours) * 60)
    return f"{hours}h {minutes}m"