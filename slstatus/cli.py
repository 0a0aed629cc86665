"""Command line entry point: build the status line and publish it."""

from __future__ import annotations

import signal
import sys
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TextIO

from .components.battery import battery_perc
from .components.clock import datetime
from .util import INTERVAL, MAXLEN, UNKNOWN_STR, die, warn
from .xdisplay import XConnection, open_display

VERSION = "1.0"
PROGRAM = "slstatus"


@dataclass(frozen=True)
class Arg:
    """One status entry: a component, a printf-style format and its argument."""

    func: Callable[[str | None], str | None]
    fmt: str
    args: str | None = None


@dataclass(frozen=True)
class Options:
    """Command line settings."""

    single: bool = False  # write to stdout instead of the root window name
    once: bool = False  # print a single status line and exit


DEFAULT_ARGS: tuple[Arg, ...] = (
    Arg(datetime, "%s ", "%F %T"),
    Arg(battery_perc, "BAT0 %s%% ", "BAT0"),
    Arg(battery_perc, "BAT1 %s%% ", "BAT1"),
)


def _usage() -> None:
    die(f"usage: {PROGRAM} [-v] [-s] [-1]")


def parse_args(argv: Sequence[str]) -> Options:
    """Parse the flags -v, -s and -1; exit with a message on anything else."""
    single = once = False
    rest = list(argv)
    while rest and rest[0].startswith("-") and len(rest[0]) > 1:
        arg = rest.pop(0)
        if arg == "--":
            break
        for flag in arg[1:]:
            if flag == "v":
                die(f"{PROGRAM}-{VERSION}")
            elif flag == "1":
                once = single = True
            elif flag == "s":
                single = True
            else:
                _usage()
    if rest:
        _usage()
    return Options(single=single, once=once)


def build_status(
    args: Sequence[Arg], unknown: str = UNKNOWN_STR, maxlen: int = MAXLEN
) -> str:
    """Concatenate every entry's formatted value, keeping below ``maxlen`` bytes."""
    status = b""
    for arg in args:
        value = arg.func(arg.args)
        if value is None:
            value = unknown
        try:
            piece = (arg.fmt % (value,)).encode()
        except (TypeError, ValueError) as error:
            warn("vsnprintf", error)
            break
        room = maxlen - len(status)
        if len(piece) >= room:
            warn("vsnprintf: Output truncated")
            status += piece[: max(room - 1, 0)]
            break
        status += piece
    return status.decode(errors="ignore")


class _Wakeup(Exception):
    """Raised from a signal handler to cut the sleep between updates short."""


class _Loop:
    def __init__(self, done: bool) -> None:
        self.done = done
        self.sleeping = False

    def handle(self, signo: int, frame: object) -> None:
        if signo != signal.SIGUSR1:
            self.done = True
        if self.sleeping:
            raise _Wakeup

    def sleep(self, seconds: float) -> None:
        self.sleeping = True
        try:
            time.sleep(seconds)
        except _Wakeup:
            pass
        finally:
            self.sleeping = False


def _install(loop: _Loop) -> dict[int, object]:
    previous: dict[int, object] = {}
    try:
        for signo in (signal.SIGINT, signal.SIGTERM, signal.SIGUSR1):
            previous[signo] = signal.signal(signo, loop.handle)
    except ValueError:
        # not in the main thread: run without signal handling
        pass
    return previous


def _publish(options: Options, conn: XConnection | None, status: str, out: TextIO) -> None:
    if options.single:
        try:
            out.write(status + "\n")
            out.flush()
        except OSError as error:
            die("puts", error)
    else:
        try:
            conn.store_name(status)
        except OSError:
            die("XStoreName: Allocation failed")


def run(options: Options, args: Sequence[Arg], out: TextIO | None = None) -> None:
    """Update the status every interval until a signal or ``options.once`` stops it."""
    out = sys.stdout if out is None else out
    loop = _Loop(done=options.once)
    previous = _install(loop)

    conn: XConnection | None = None
    try:
        if not options.single:
            try:
                conn = open_display()
            except OSError:
                die("XOpenDisplay: Failed to open display")

        while True:
            start = time.monotonic()
            _publish(options, conn, build_status(args), out)
            if loop.done:
                break
            wait = INTERVAL / 1000 - (time.monotonic() - start)
            if wait >= 0:
                loop.sleep(wait)
            if loop.done:
                break
    finally:
        if conn is not None:
            try:
                conn.store_name(None)
            except OSError:
                pass
            conn.close()
        for signo, handler in previous.items():
            signal.signal(signo, handler)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the status monitor with the default configuration."""
    options = parse_args(sys.argv[1:] if argv is None else argv)
    run(options, DEFAULT_ARGS, sys.stdout)
    return 0