import socket
import struct

import pytest

from slstatus.xdisplay import (
    ATOM_STRING,
    ATOM_WM_NAME,
    X_CHANGE_PROPERTY,
    X_GET_KEYBOARD_CONTROL,
    DisplayError,
    DisplayName,
    XConnection,
    open_display,
    parse_display,
)


@pytest.fixture
def pair():
    client, server = socket.socketpair()
    yield client, server
    client.close()
    server.close()


def _recv_exact(sock, size):
    data = b""
    while len(data) < size:
        chunk = sock.recv(size - len(data))
        assert chunk
        data += chunk
    return data


def _screen(root, depths=()):
    head = struct.pack(
        "<IIIIIHHHHHHIBBBB",
        root, 0x20, 0xFFFFFF, 0, 0, 1024, 768, 270, 200, 1, 1, 0x21, 0, 0, 24,
        len(depths),
    )
    body = b"".join(
        struct.pack("<BxH4x", 24, count) + bytes(24 * count) for count in depths
    )
    return head + body


def _setup_reply(*screens):
    vendor = b"Test"
    data = (
        struct.pack(
            "<IIIIHHBBBBBBBB4x",
            1, 0x400000, 0x1FFFFF, 256, len(vendor), 65535, len(screens), 0,
            0, 0, 32, 32, 8, 255,
        )
        + vendor
        + b"".join(screens)
    )
    return struct.pack("<BxHHH", 1, 11, 0, len(data) // 4) + data


def _keyboard_reply(seq, led_mask):
    return struct.pack("<BBHIIBBHHxx", 1, 1, seq, 5, led_mask, 0, 50, 400, 100) + bytes(32)


def _connect(pair, root=0x2A1):
    client, server = pair
    server.sendall(_setup_reply(_screen(root)))
    conn = XConnection(client)
    _recv_exact(server, 12)
    return conn, server


def test_parse_display_local():
    assert parse_display(":0") == DisplayName("", 0, 0)


def test_parse_display_host_and_screen():
    name = parse_display("localhost:10.1")
    assert (name.host, name.display, name.screen) == ("localhost", 10, 1)
    assert not name.is_local


def test_parse_display_ipv6():
    assert parse_display("[::1]:2").host == "::1"


def test_parse_display_from_environment(monkeypatch):
    monkeypatch.setenv("DISPLAY", ":3")
    assert parse_display().display == 3


@pytest.mark.parametrize("name", ["nodisplay", ":x", ":1.", ""])
def test_parse_display_invalid(name):
    with pytest.raises(DisplayError):
        parse_display(name)


def test_parse_display_unset(monkeypatch):
    monkeypatch.delenv("DISPLAY", raising=False)
    with pytest.raises(DisplayError):
        parse_display()


def test_open_display_invalid_name():
    with pytest.raises(DisplayError):
        open_display("bad")


def test_setup_request_and_root(pair):
    client, server = pair
    server.sendall(_setup_reply(_screen(0x2A1)))
    conn = XConnection(client)
    request = _recv_exact(server, 12)
    assert struct.unpack("<BxHHHH2x", request) == (ord("l"), 11, 0, 0, 0)
    assert conn.root == 0x2A1


def test_setup_sends_auth(pair):
    client, server = pair
    server.sendall(_setup_reply(_screen(1)))
    name, cookie = b"MIT-MAGIC-COOKIE-1", b"\x01" * 16
    XConnection(client, auth=(name, cookie))
    request = _recv_exact(server, 12 + 20 + 16)
    _, _, _, nlen, dlen = struct.unpack_from("<BxHHHH2x", request)
    assert (nlen, dlen) == (len(name), len(cookie))
    assert request[12:12 + len(name)] == name
    assert request[32:] == cookie


def test_selects_requested_screen(pair):
    client, server = pair
    server.sendall(_setup_reply(_screen(0x10, depths=(2, 0)), _screen(0x20)))
    assert XConnection(client, screen=1).root == 0x20


def test_missing_screen_raises(pair):
    client, server = pair
    server.sendall(_setup_reply(_screen(0x10)))
    with pytest.raises(DisplayError):
        XConnection(client, screen=2)


def test_setup_refused(pair):
    client, server = pair
    reason = b"No protocol specified"
    padded = reason + bytes(-len(reason) % 4)
    server.sendall(struct.pack("<BBHHH", 0, len(reason), 11, 0, len(padded) // 4) + padded)
    with pytest.raises(DisplayError, match="No protocol specified"):
        XConnection(client)
    assert client.fileno() == -1


def test_truncated_setup(pair):
    client, server = pair
    server.sendall(b"\x01\x00\x0b\x00")
    server.shutdown(socket.SHUT_WR)
    with pytest.raises(DisplayError):
        XConnection(client)


def test_store_name(pair):
    conn, server = _connect(pair)
    conn.store_name("hello")
    request = _recv_exact(server, 32)
    opcode, mode, length, window, prop, type_, fmt, count = struct.unpack_from(
        "<BBHIIIB3xI", request
    )
    assert (opcode, mode, window, prop, type_, fmt, count) == (
        X_CHANGE_PROPERTY, 0, 0x2A1, ATOM_WM_NAME, ATOM_STRING, 8, 5,
    )
    assert length * 4 == len(request)
    assert request[24:] == b"hello\0\0\0"


def test_store_name_none_is_empty(pair):
    conn, server = _connect(pair)
    conn.store_name(None)
    request = _recv_exact(server, 24)
    _, _, length, _, _, _, _, count = struct.unpack("<BBHIIIB3xI", request)
    assert length * 4 == 24
    assert count == 0


def test_store_name_utf8(pair):
    conn, server = _connect(pair)
    text = "b\u00fc"
    encoded = text.encode()
    conn.store_name(text)
    request = _recv_exact(server, 28)
    assert struct.unpack_from("<I", request, 20)[0] == len(encoded)
    assert request[24:24 + len(encoded)] == encoded


def test_keyboard_led_mask_skips_events(pair):
    conn, server = _connect(pair)
    server.sendall(bytes([12]) + bytes(31))
    server.sendall(_keyboard_reply(1, 3))
    assert conn.keyboard_led_mask() == 3
    assert _recv_exact(server, 4) == struct.pack("<BxH", X_GET_KEYBOARD_CONTROL, 1)


def test_keyboard_led_mask_follows_sequence(pair):
    conn, server = _connect(pair)
    conn.store_name("x")
    server.sendall(_keyboard_reply(1, 1) + _keyboard_reply(2, 2))
    assert conn.keyboard_led_mask() == 2


def test_keyboard_led_mask_error(pair):
    conn, server = _connect(pair)
    server.sendall(struct.pack("<BBHI", 0, 1, 1, 0) + bytes(24))
    with pytest.raises(DisplayError):
        conn.keyboard_led_mask()


def test_context_manager_closes(pair):
    client, server = pair
    server.sendall(_setup_reply(_screen(5)))
    with XConnection(client) as conn:
        assert conn.root == 5
    assert client.fileno() == -1