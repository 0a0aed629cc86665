"""Master volume from an OSS mixer device."""

from __future__ import annotations

import fcntl
import os
import struct

from ..util import warn

SOUND_MIXER_VOLUME = 0
SOUND_MIXER_READ_DEVMASK = 0x80044DFE
_MIXER_READ_BASE = 0x80044D00


def _mixer_read(device: int) -> int:
    return _MIXER_READ_BASE | device


def _ioctl_int(fd: int, request: int) -> int:
    buf = bytearray(4)
    fcntl.ioctl(fd, request, buf)
    return struct.unpack("i", buf)[0]


def vol_perc(card: str) -> str | None:
    """Master volume in percent, read from the mixer device ``card``."""
    try:
        fd = os.open(card, os.O_RDONLY | os.O_NONBLOCK)
    except OSError as error:
        warn(f"open '{card}'", error)
        return None

    try:
        try:
            devmask = _ioctl_int(fd, SOUND_MIXER_READ_DEVMASK)
        except OSError as error:
            warn("ioctl 'SOUND_MIXER_READ_DEVMASK'", error)
            return None
        if not devmask & (1 << SOUND_MIXER_VOLUME):
            warn(f"'{card}' has no master volume control")
            return None
        try:
            value = _ioctl_int(fd, _mixer_read(SOUND_MIXER_VOLUME))
        except OSError as error:
            warn(f"ioctl 'MIXER_READ({SOUND_MIXER_VOLUME})'", error)
            return None
    finally:
        os.close(fd)

    return str(value & 0xFF)