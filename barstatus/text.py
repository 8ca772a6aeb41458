"""Components that show the first line of a file or of a command's output."""

from __future__ import annotations

import os
import subprocess

from .util import ComponentError

# Longest line taken from a file or a command, as with a 1024-byte buffer.
_MAX_LINE = 1022


def _first_line(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if not line:
        raise ComponentError("empty output")
    return line


def cat(path: str | os.PathLike[str]) -> str:
    """Return the first line of ``path`` without its newline."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            line = handle.readline(_MAX_LINE)
    except OSError as exc:
        raise ComponentError(f"fopen '{os.fspath(path)}': {exc.strerror}") from exc
    return _first_line(line)


def run_command(cmd: str) -> str:
    """Run ``cmd`` through the shell and return the first line it prints."""
    try:
        process = subprocess.Popen(
            cmd,
            shell=True,
            stdout=subprocess.PIPE,
            text=True,
            errors="replace",
        )
    except OSError as exc:
        raise ComponentError(f"popen '{cmd}': {exc.strerror}") from exc

    with process:
        assert process.stdout is not None
        line = process.stdout.readline(_MAX_LINE)
        process.stdout.close()
        process.wait()
    return _first_line(line)