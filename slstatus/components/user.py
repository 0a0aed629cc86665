"""Identity of the current user."""

from __future__ import annotations

import os
import pwd

from ..util import warn


def gid(unused: str | None = None) -> str:
    """Real group ID."""
    return str(os.getgid())


def uid(unused: str | None = None) -> str:
    """Effective user ID."""
    return str(os.geteuid())


def username(unused: str | None = None) -> str | None:
    """Login name of the effective user."""
    euid = os.geteuid()
    try:
        return pwd.getpwuid(euid).pw_name
    except KeyError as error:
        warn(f"getpwuid '{euid}'", error)
        return None