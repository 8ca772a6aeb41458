"""Components reporting file-system capacity."""

from __future__ import annotations

import os

from .util import ComponentError, fmt_human


def _statvfs(path: str | os.PathLike[str]) -> os.statvfs_result:
    try:
        return os.statvfs(path)
    except OSError as exc:
        raise ComponentError(f"statvfs '{os.fspath(path)}': {exc.strerror}") from exc


def disk_free(path: str | os.PathLike[str]) -> str:
    """Return the space available to unprivileged users."""
    fs = _statvfs(path)
    return fmt_human(fs.f_frsize * fs.f_bavail, 1024)


def disk_perc(path: str | os.PathLike[str]) -> str:
    """Return the percentage of the file system in use."""
    fs = _statvfs(path)
    if fs.f_blocks == 0:
        raise ComponentError(f"statvfs '{os.fspath(path)}': no blocks")
    return str(int(100 * (1 - fs.f_bavail / fs.f_blocks)))


def disk_total(path: str | os.PathLike[str]) -> str:
    """Return the total size of the file system."""
    fs = _statvfs(path)
    return fmt_human(fs.f_frsize * fs.f_blocks, 1024)


def disk_used(path: str | os.PathLike[str]) -> str:
    """Return the space in use on the file system."""
    fs = _statvfs(path)
    return fmt_human(fs.f_frsize * (fs.f_blocks - fs.f_bfree), 1024)