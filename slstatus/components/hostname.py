"""Host name."""

from __future__ import annotations

import socket

from ..util import warn


def hostname(unused: str | None = None) -> str | None:
    """The system's host name."""
    try:
        return socket.gethostname()
    except OSError as error:
        warn("gethostbyname", error)
        return None