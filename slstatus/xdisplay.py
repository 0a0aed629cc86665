"""Minimal X11 client: connect to a display, name the root window, read the LEDs."""

from __future__ import annotations

import os
import re
import socket
import struct
from collections.abc import Iterator
from dataclasses import dataclass

X_PROTOCOL_MAJOR = 11
X_PROTOCOL_MINOR = 0
X_CHANGE_PROPERTY = 18
X_GET_KEYBOARD_CONTROL = 103
ATOM_STRING = 31
ATOM_WM_NAME = 39
PROP_MODE_REPLACE = 0
X_TCP_PORT = 6000
X_UNIX_SOCKET = "/tmp/.X11-unix/X{}"

_AUTH_NAME = b"MIT-MAGIC-COOKIE-1"
_FAMILY_INTERNET = 0
_FAMILY_LOCAL = 256
_FAMILY_WILD = 65535

_DISPLAY_RE = re.compile(r"(\d+)(?:\.(\d+))?", re.ASCII)


class DisplayError(OSError):
    """Raised when a display cannot be reached or answers with an error."""


@dataclass(frozen=True)
class DisplayName:
    """The parts of a display name such as 'host:0.1'."""

    host: str
    display: int
    screen: int = 0

    @property
    def is_local(self) -> bool:
        return self.host in ("", "unix")


def _pad(data: bytes) -> bytes:
    return data + b"\0" * (-len(data) % 4)


def _padded(length: int) -> int:
    return (length + 3) & ~3


def parse_display(name: str | None = None) -> DisplayName:
    """Split a display name, taken from $DISPLAY when ``name`` is None."""
    if name is None:
        name = os.environ.get("DISPLAY")
    if not name:
        raise DisplayError("no display specified")
    host, sep, rest = name.rpartition(":")
    match = _DISPLAY_RE.fullmatch(rest)
    if not sep or match is None:
        raise DisplayError(f"invalid display name '{name}'")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    number, screen = match.groups()
    return DisplayName(host, int(number), int(screen) if screen else 0)


def _take(data: bytes, pos: int) -> tuple[bytes, int]:
    (length,) = struct.unpack_from(">H", data, pos)
    pos += 2
    value = data[pos:pos + length]
    if len(value) != length:
        raise struct.error("truncated entry")
    return value, pos + length


def _xauthority_entries(path: str) -> Iterator[tuple[int, bytes, bytes, bytes, bytes]]:
    try:
        with open(path, "rb") as fp:
            data = fp.read()
    except OSError:
        return
    pos = 0
    while pos < len(data):
        try:
            (family,) = struct.unpack_from(">H", data, pos)
            address, pos = _take(data, pos + 2)
            number, pos = _take(data, pos)
            name, pos = _take(data, pos)
            cookie, pos = _take(data, pos)
        except struct.error:
            return
        yield family, address, number, name, cookie


def _find_cookie(display: DisplayName) -> tuple[bytes, bytes] | None:
    path = os.environ.get("XAUTHORITY") or os.path.join(
        os.path.expanduser("~"), ".Xauthority"
    )
    own_host = socket.gethostname()
    wanted: set[tuple[int, bytes]] = set()
    if display.is_local or display.host in ("localhost", own_host):
        wanted.add((_FAMILY_LOCAL, own_host.encode()))
    else:
        try:
            wanted.add(
                (_FAMILY_INTERNET, socket.inet_aton(socket.gethostbyname(display.host)))
            )
        except OSError:
            pass

    number = str(display.display).encode()
    for family, address, entry_number, name, cookie in _xauthority_entries(path):
        if entry_number and entry_number != number:
            continue
        if (family == _FAMILY_WILD or (family, address) in wanted) and name == _AUTH_NAME:
            return name, cookie
    return None


def _connect(display: DisplayName) -> socket.socket:
    if display.is_local:
        path = X_UNIX_SOCKET.format(display.display)
        last: Exception | None = None
        for address in (path, "\0" + path):
            sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
            try:
                sock.connect(address)
                return sock
            except (OSError, ValueError) as error:
                sock.close()
                last = error
        raise DisplayError(f"cannot connect to '{path}': {last}")
    try:
        return socket.create_connection((display.host, X_TCP_PORT + display.display))
    except OSError as error:
        raise DisplayError(f"cannot connect to '{display.host}': {error}") from error


class XConnection:
    """An open connection to an X server, bound to one screen's root window."""

    def __init__(
        self,
        sock: socket.socket,
        auth: tuple[bytes, bytes] | None = None,
        screen: int = 0,
    ) -> None:
        self._sock = sock
        self._sequence = 0
        try:
            self.root = self._setup(auth or (b"", b""), screen)
        except Exception:
            sock.close()
            raise

    def _send(self, data: bytes) -> None:
        try:
            self._sock.sendall(data)
        except OSError as error:
            raise DisplayError(f"write to display failed: {error}") from error

    def _request(self, data: bytes) -> None:
        self._send(data)
        self._sequence = (self._sequence + 1) & 0xFFFF

    def _recv(self, size: int) -> bytes:
        data = bytearray()
        while len(data) < size:
            try:
                chunk = self._sock.recv(size - len(data))
            except OSError as error:
                raise DisplayError(f"read from display failed: {error}") from error
            if not chunk:
                raise DisplayError("connection closed by the display")
            data += chunk
        return bytes(data)

    def _setup(self, auth: tuple[bytes, bytes], screen: int) -> int:
        name, data = auth
        self._send(
            struct.pack(
                "<BxHHHH2x",
                ord("l"),
                X_PROTOCOL_MAJOR,
                X_PROTOCOL_MINOR,
                len(name),
                len(data),
            )
            + _pad(name)
            + _pad(data)
        )
        status, reason_len, _major, _minor, length = struct.unpack(
            "<BBHHH", self._recv(8)
        )
        body = self._recv(length * 4)
        if status == 0:
            reason = body[:reason_len].decode(errors="replace")
            raise DisplayError(f"connection refused: {reason}")
        if status == 2:
            reason = body.rstrip(b"\0").decode(errors="replace")
            raise DisplayError(f"authentication required: {reason}")
        if status != 1:
            raise DisplayError(f"unexpected setup status {status}")
        try:
            return self._root_window(body, screen)
        except (struct.error, IndexError) as error:
            raise DisplayError("malformed setup reply") from error

    @staticmethod
    def _root_window(body: bytes, screen: int) -> int:
        (vendor_len,) = struct.unpack_from("<H", body, 16)
        nscreens, nformats = struct.unpack_from("<BB", body, 20)
        if not 0 <= screen < nscreens:
            raise DisplayError(f"screen {screen} does not exist")
        offset = 32 + _padded(vendor_len) + 8 * nformats
        for _ in range(screen):
            ndepths = body[offset + 39]
            offset += 40
            for _ in range(ndepths):
                (nvisuals,) = struct.unpack_from("<H", body, offset + 2)
                offset += 8 + 24 * nvisuals
        (root,) = struct.unpack_from("<I", body, offset)
        return root

    def _reply(self) -> bytes:
        while True:
            packet = self._recv(32)
            kind = packet[0]
            if kind == 0:
                code = packet[1]
                (sequence,) = struct.unpack_from("<H", packet, 2)
                if sequence == self._sequence:
                    raise DisplayError(f"X protocol error {code}")
            elif kind == 1:
                sequence, extra = struct.unpack_from("<HI", packet, 2)
                packet += self._recv(extra * 4)
                if sequence == self._sequence:
                    return packet
            # events are of no interest here

    def store_name(self, name: str | None) -> None:
        """Set WM_NAME of the root window; None leaves it empty."""
        data = (name or "").encode()
        header = struct.pack(
            "<BBHIIIB3xI",
            X_CHANGE_PROPERTY,
            PROP_MODE_REPLACE,
            (24 + _padded(len(data))) // 4,
            self.root,
            ATOM_WM_NAME,
            ATOM_STRING,
            8,
            len(data),
        )
        self._request(header + _pad(data))

    def keyboard_led_mask(self) -> int:
        """The keyboard LED bit mask: bit 0 caps lock, bit 1 num lock."""
        self._request(struct.pack("<BxH", X_GET_KEYBOARD_CONTROL, 1))
        reply = self._reply()
        (led_mask,) = struct.unpack_from("<I", reply, 8)
        return led_mask

    def close(self) -> None:
        """Close the connection."""
        self._sock.close()

    def __enter__(self) -> XConnection:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def open_display(name: str | None = None) -> XConnection:
    """Connect to the display ``name`` (default $DISPLAY)."""
    display = parse_display(name)
    sock = _connect(display)
    try:
        auth = _find_cookie(display)
    except Exception:
        sock.close()
        raise
    return XConnection(sock, auth=auth, screen=display.screen)