"""IPv4 and IPv6 addresses of a network interface."""

from __future__ import annotations

import fcntl
import ipaddress
import socket
import struct

from ..util import warn

IF_INET6 = "/proc/net/if_inet6"
SIOCGIFADDR = 0x8915
_IFNAMSIZ = 16


def ipv4(interface: str) -> str | None:
    """First IPv4 address of ``interface``."""
    name = interface.encode()
    if len(name) >= _IFNAMSIZ:
        return None
    request = struct.pack("256s", name)
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        try:
            reply = fcntl.ioctl(sock.fileno(), SIOCGIFADDR, request)
        except OSError:
            return None
    return socket.inet_ntoa(reply[20:24])


def ipv6(interface: str) -> str | None:
    """First IPv6 address of ``interface``, scoped with the name if link-local."""
    try:
        with open(IF_INET6, encoding="ascii") as fp:
            lines = fp.read().splitlines()
    except OSError as error:
        warn("getifaddrs", error)
        return None

    for line in lines:
        fields = line.split()
        if len(fields) < 6 or fields[5] != interface:
            continue
        try:
            address = ipaddress.IPv6Address(bytes.fromhex(fields[0]))
        except ValueError as error:
            warn("getnameinfo", error)
            return None
        host = str(address)
        if address.is_link_local:
            host += f"%{interface}"
        return host
    return None