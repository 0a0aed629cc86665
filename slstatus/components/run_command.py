"""First line of a shell command's output."""

from __future__ import annotations

import subprocess

from ..util import BUFSIZE, warn


def run_command(cmd: str) -> str | None:
    """Run ``cmd`` through the shell and return the first line it prints."""
    try:
        proc = subprocess.Popen(
            cmd,
            shell=True,
            stdout=subprocess.PIPE,
            text=True,
            errors="replace",
        )
    except OSError as error:
        warn(f"popen '{cmd}'", error)
        return None

    with proc:
        line = proc.stdout.readline(BUFSIZE - 2)

    if line.endswith("\n"):
        line = line[:-1]
    return line or None