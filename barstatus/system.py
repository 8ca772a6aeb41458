"""Components describing the host, the user and simple kernel counters."""

from __future__ import annotations

import os
import pwd
import socket
import sys
import time

from .util import ComponentError, read_int

ENTROPY_AVAIL = "/proc/sys/kernel/random/entropy_avail"
_BUFFER_SIZE = 1024


def datetime(fmt: str) -> str:
    """Format the current local time with a strftime pattern."""
    result = time.strftime(fmt, time.localtime())
    if not result or len(result.encode()) >= _BUFFER_SIZE:
        raise ComponentError("strftime: Result string exceeds buffer size")
    return result


def hostname(unused: str | None = None) -> str:
    """Return the host name."""
    try:
        return socket.gethostname()
    except OSError as exc:
        raise ComponentError(f"gethostname: {exc.strerror}") from exc


def kernel_release(unused: str | None = None) -> str:
    """Return the running kernel's release string."""
    try:
        return os.uname().release
    except OSError as exc:
        raise ComponentError(f"uname: {exc.strerror}") from exc


def load_avg(unused: str | None = None) -> str:
    """Return the 1, 5 and 15 minute load averages."""
    try:
        one, five, fifteen = os.getloadavg()
    except OSError as exc:
        raise ComponentError("getloadavg: Failed to obtain load average") from exc
    return f"{one:.2f} {five:.2f} {fifteen:.2f}"


def format_uptime(seconds: int) -> str:
    """Render a number of seconds as hours and minutes."""
    hours, rest = divmod(int(seconds), 3600)
    return f"{hours}h {rest // 60}m"


def _uptime_clock() -> int:
    for name in ("CLOCK_BOOTTIME", "CLOCK_UPTIME", "CLOCK_MONOTONIC"):
        clock = getattr(time, name, None)
        if clock is not None:
            return clock
    raise ComponentError("no uptime clock available")


def uptime(unused: str | None = None) -> str:
    """Return the time since boot as hours and minutes."""
    clock = _uptime_clock()
    try:
        seconds = time.clock_gettime(clock)
    except OSError as exc:
        raise ComponentError(f"clock_gettime {clock}") from exc
    return format_uptime(int(seconds))


def gid(unused: str | None = None) -> str:
    """Return the real group id."""
    return str(os.getgid())


def uid(unused: str | None = None) -> str:
    """Return the effective user id."""
    return str(os.geteuid())


def username(unused: str | None = None) -> str:
    """Return the name of the effective user."""
    euid = os.geteuid()
    try:
        return pwd.getpwuid(euid).pw_name
    except KeyError as exc:
        raise ComponentError(f"getpwuid '{euid}'") from exc


def entropy(unused: str | None = None, path: str = ENTROPY_AVAIL) -> str:
    """Return the available kernel entropy; BSD kernels report infinity."""
    if sys.platform.startswith(("openbsd", "freebsd")):
        return "\u221e"
    return str(read_int(path))


def num_files(path: str | os.PathLike[str]) -> str:
    """Count the entries of a directory."""
    try:
        with os.scandir(path) as entries:
            count = sum(1 for _ in entries)
    except OSError as exc:
        raise ComponentError(f"opendir '{os.fspath(path)}': {exc.strerror}") from exc
    return str(count)


def temp(file: str | os.PathLike[str]) -> str:
    """Return a millidegree thermal reading in whole degrees Celsius."""
    return str(read_int(file) // 1000)