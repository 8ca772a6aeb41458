"""Memory components read from /proc/meminfo."""

from __future__ import annotations

import os

from .util import ComponentError, fmt_human, read_text

MEMINFO = "/proc/meminfo"


def parse_meminfo(text: str) -> dict[str, int]:
    """Map each ``Name: value kB`` line of a meminfo listing to its value."""
    result: dict[str, int] = {}
    for line in text.splitlines():
        name, sep, rest = line.partition(":")
        fields = rest.split()
        if not sep or not fields:
            continue
        try:
            result[name.strip()] = int(fields[0])
        except ValueError:
            continue
    return result


def _meminfo(path: str | os.PathLike[str], *keys: str) -> list[int]:
    info = parse_meminfo(read_text(path))
    try:
        return [info[key] for key in keys]
    except KeyError as exc:
        raise ComponentError(f"'{os.fspath(path)}' lacks {exc.args[0]}") from exc


def ram_free(unused: str | None = None, path: str | os.PathLike[str] = MEMINFO) -> str:
    """Return the memory available for new allocations."""
    (available,) = _meminfo(path, "MemAvailable")
    return fmt_human(available * 1024, 1024)


def ram_perc(unused: str | None = None, path: str | os.PathLike[str] = MEMINFO) -> str:
    """Return the percentage of memory in use, excluding buffers and cache."""
    total, free, buffers, cached = _meminfo(
        path, "MemTotal", "MemFree", "Buffers", "Cached"
    )
    if total == 0:
        raise ComponentError("ram_perc: total memory is zero")
    return str(100 * ((total - free) - (buffers + cached)) // total)


def ram_total(unused: str | None = None, path: str | os.PathLike[str] = MEMINFO) -> str:
    """Return the total amount of memory."""
    (total,) = _meminfo(path, "MemTotal")
    return fmt_human(total * 1024, 1024)


def ram_used(unused: str | None = None, path: str | os.PathLike[str] = MEMINFO) -> str:
    """Return the memory in use, excluding buffers and cache."""
    total, free, buffers, cached = _meminfo(
        path, "MemTotal", "MemFree", "Buffers", "Cached"
    )
    return fmt_human((total - free - buffers - cached) * 1024, 1024)