"""Swap components read from /proc/meminfo."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .ram import MEMINFO, parse_meminfo
from .util import ComponentError, fmt_human, read_text


@dataclass(frozen=True)
class SwapInfo:
    """Swap figures in kB."""

    total: int
    free: int
    cached: int

    @property
    def used(self) -> int:
        return self.total - self.free - self.cached


def read_swap_info(path: str | os.PathLike[str] = MEMINFO) -> SwapInfo:
    """Read the swap totals from a meminfo file."""
    info = parse_meminfo(read_text(path))
    try:
        return SwapInfo(
            total=info["SwapTotal"],
            free=info["SwapFree"],
            cached=info["SwapCached"],
        )
    except KeyError as exc:
        raise ComponentError(f"'{os.fspath(path)}' lacks {exc.args[0]}") from exc


def swap_free(unused: str | None = None, path: str | os.PathLike[str] = MEMINFO) -> str:
    """Return the unused swap space."""
    return fmt_human(read_swap_info(path).free * 1024, 1024)


def swap_perc(unused: str | None = None, path: str | os.PathLike[str] = MEMINFO) -> str:
    """Return the percentage of swap in use."""
    info = read_swap_info(path)
    if info.total == 0:
        raise ComponentError("swap_perc: no swap configured")
    return str(int(100 * info.used / info.total))


def swap_total(unused: str | None = None, path: str | os.PathLike[str] = MEMINFO) -> str:
    """Return the total swap space."""
    return fmt_human(read_swap_info(path).total * 1024, 1024)


def swap_used(unused: str | None = None, path: str | os.PathLike[str] = MEMINFO) -> str:
    """Return the swap space in use, excluding swap cache."""
    return fmt_human(read_swap_info(path).used * 1024, 1024)