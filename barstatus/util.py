"""Shared helpers: warnings, human-readable sizes and small file readers."""

from __future__ import annotations

import os
import re
import sys

_PREFIXES = {
    1000: ("", "k", "M", "G", "T", "P", "E", "Z", "Y"),
    1024: ("", "K", "M", "G", "T", "P", "E", "Z", "Y"),
}

_UNSIGNED = re.compile(r"\s*\+?(\d+)")


class ComponentError(Exception):
    """Raised when a status component cannot produce a value."""


def warn(message: str) -> None:
    """Write a diagnostic message to standard error."""
    print(message, file=sys.stderr)


def fmt_human(num: int | float, base: int) -> str:
    """Format ``num`` with one decimal and an SI (1000) or binary (1024) prefix."""
    try:
        prefixes = _PREFIXES[base]
    except KeyError:
        raise ValueError("fmt_human: Invalid base") from None

    scaled = float(num)
    index = 0
    while index < len(prefixes) - 1 and scaled >= base:
        scaled /= base
        index += 1
    return f"{scaled:.1f}{prefixes[index]}"


def read_text(path: str | os.PathLike[str]) -> str:
    """Return the whole content of a text file."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            return handle.read()
    except OSError as exc:
        raise ComponentError(f"fopen '{os.fspath(path)}': {exc.strerror}") from exc


def read_int(path: str | os.PathLike[str]) -> int:
    """Read the leading unsigned integer of a file."""
    match = _UNSIGNED.match(read_text(path))
    if match is None:
        raise ComponentError(f"no integer in '{os.fspath(path)}'")
    return int(match.group(1))