"""Receive and transmit speed of a network interface."""

from __future__ import annotations

import os

from ..util import INTERVAL, fmt_human, read_int

NET_DIR = "/sys/class/net"

# byte counters seen on the previous call, per direction
_last: dict[str, int] = {"rx": 0, "tx": 0}


def _netspeed(interface: str, direction: str) -> str | None:
    path = os.path.join(NET_DIR, interface, "statistics", f"{direction}_bytes")
    old = _last[direction]
    current = read_int(path)
    if current is None:
        return None
    _last[direction] = current
    if old == 0:
        return None
    return fmt_human((current - old) * 1000 // INTERVAL, 1024)


def netspeed_rx(interface: str) -> str | None:
    """Bytes received per second since the previous call."""
    return _netspeed(interface, "rx")


def netspeed_tx(interface: str) -> str | None:
    """Bytes transmitted per second since the previous call."""
    return _netspeed(interface, "tx")