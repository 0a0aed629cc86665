"""WiFi link quality and network name."""

from __future__ import annotations

import array
import fcntl
import os
import re
import socket
import struct

from ..util import read_text, warn

NET_DIR = "/sys/class/net"
PROC_NET_WIRELESS = "/proc/net/wireless"
SIOCGIWESSID = 0x8B1B
IW_ESSID_MAX_SIZE = 32
# maximum link quality reported by /proc/net/wireless
MAX_QUALITY = 70

_IFNAMSIZ = 16
_IWREQ_SIZE = 32
_QUALITY_RE = re.compile(r"\s*[+-]?\d+\s+([+-]?\d+)")


def link_quality(text: str, interface: str) -> int | None:
    """Link quality in percent from /proc/net/wireless contents.

    Only the first data line (the third line) is examined.
    """
    lines = text.splitlines(keepends=True)
    if len(lines) < 3:
        return None
    line = lines[2]
    start = line.find(interface)
    if start < 0:
        return None
    match = _QUALITY_RE.match(line, start + len(interface) + 2)
    if match is None:
        return None
    return int(int(match.group(1)) / MAX_QUALITY * 100)


def wifi_perc(interface: str) -> str | None:
    """Signal quality in percent, if the interface is up."""
    path = os.path.join(NET_DIR, interface, "operstate")
    try:
        with open(path, encoding="ascii", errors="replace") as fp:
            status = fp.readline(4)
    except OSError as error:
        warn(f"fopen '{path}'", error)
        return None
    if status != "up\n":
        return None

    text = read_text(PROC_NET_WIRELESS)
    if text is None:
        return None
    quality = link_quality(text, interface)
    return None if quality is None else str(quality)


def wifi_essid(interface: str) -> str | None:
    """Name of the network the interface is associated with."""
    name = interface.encode()
    if len(name) >= _IFNAMSIZ:
        return None

    essid = array.array("B", bytes(IW_ESSID_MAX_SIZE + 1))
    address, _ = essid.buffer_info()
    request = struct.pack("16sPHH", name, address, len(essid), 0).ljust(
        _IWREQ_SIZE, b"\0"
    )

    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    except OSError as error:
        warn("socket 'AF_INET'", error)
        return None
    with sock:
        try:
            fcntl.ioctl(sock.fileno(), SIOCGIWESSID, request)
        except OSError as error:
            warn("ioctl 'SIOCGIWESSID'", error)
            return None

    value = essid.tobytes().split(b"\0", 1)[0]
    return value.decode(errors="replace") or None