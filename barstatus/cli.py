"""The status loop and its command line."""

from __future__ import annotations

import contextlib
import os
import signal
import socket
import struct
import sys
import threading
import time
from collections.abc import Iterable, Iterator
from typing import TextIO

from .config import INTERVAL, MAXLEN, UNKNOWN_STR, Arg, default_args
from .util import ComponentError, warn

USAGE = "usage: barstatus [-v] [-s] [-1]"


class UsageError(Exception):
    """Raised for a malformed command line."""


def parse_args(argv: Iterable[str]) -> tuple[bool, bool]:
    """Return ``(single, once)`` from the command-line arguments."""
    args = list(argv)
    single = once = False
    while args and args[0].startswith("-") and len(args[0]) > 1:
        flag = args.pop(0)
        if flag == "--":
            break
        for letter in flag[1:]:
            if letter == "1":
                once = single = True
            elif letter == "s":
                single = True
            else:
                raise UsageError(USAGE)
    if args:
        raise UsageError(USAGE)
    return single, once


def build_status(
    args: Iterable[Arg], unknown: str = UNKNOWN_STR, maxlen: int = MAXLEN
) -> str:
    """Join the rendered components, keeping below ``maxlen`` bytes."""
    parts: list[bytes] = []
    used = 0
    for arg in args:
        piece = arg.render(unknown).encode()
        room = maxlen - used
        if len(piece) >= room:
            warn("vsnprintf: Output truncated")
            if room > 0:
                parts.append(piece[: room - 1])
            break
        parts.append(piece)
        used += len(piece)
    return b"".join(parts).decode("utf-8", errors="ignore")


def _pad(data: bytes) -> bytes:
    return data + b"\0" * (-len(data) % 4)


def _recv_exact(sock: socket.socket, size: int) -> bytes:
    chunks = bytearray()
    while len(chunks) < size:
        chunk = sock.recv(size - len(chunks))
        if not chunk:
            raise ConnectionError("X server closed the connection")
        chunks += chunk
    return bytes(chunks)


def _xauth_entries(data: bytes) -> Iterator[tuple[int, bytes, bytes, bytes, bytes]]:
    offset = 0
    while offset + 2 <= len(data):
        (family,) = struct.unpack_from(">H", data, offset)
        offset += 2
        fields = []
        for _ in range(4):
            (length,) = struct.unpack_from(">H", data, offset)
            offset += 2
            fields.append(data[offset : offset + length])
            offset += length
        address, number, name, cookie = fields
        yield family, address, number, name, cookie


def _xauthority(number: str) -> tuple[bytes, bytes]:
    path = os.environ.get("XAUTHORITY") or os.path.join(
        os.path.expanduser("~"), ".Xauthority"
    )
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError:
        return b"", b""
    try:
        for _, _, entry_number, name, cookie in _xauth_entries(data):
            if name == b"MIT-MAGIC-COOKIE-1" and entry_number in (b"", number.encode()):
                return name, cookie
    except struct.error:
        pass
    return b"", b""


class _RootWindow:
    """A minimal X11 connection that names the root window."""

    _CHANGE_PROPERTY = 18
    _WM_NAME = 39
    _STRING = 31

    def __init__(self, display: str | None = None) -> None:
        name = os.environ.get("DISPLAY", "") if display is None else display
        try:
            self._sock, number = self._connect(name)
        except (OSError, ValueError) as exc:
            raise ComponentError("XOpenDisplay: Failed to open display") from exc
        try:
            self._root = self._handshake(number)
        except (OSError, ValueError, struct.error) as exc:
            self._sock.close()
            raise ComponentError("XOpenDisplay: Failed to open display") from exc

    @staticmethod
    def _connect(name: str) -> tuple[socket.socket, str]:
        host, sep, rest = name.rpartition(":")
        number = rest.split(".", 1)[0]
        if not sep or not number.isdigit():
            raise ValueError(f"invalid display '{name}'")
        if host in ("", "unix"):
            sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
            try:
                sock.connect(f"/tmp/.X11-unix/X{number}")
            except OSError:
                sock.close()
                raise
        else:
            sock = socket.create_connection((host, 6000 + int(number)))
        return sock, number

    def _handshake(self, number: str) -> int:
        auth_name, auth_data = _xauthority(number)
        header = struct.pack(
            "<BxHHHHxx", ord("l"), 11, 0, len(auth_name), len(auth_data)
        )
        self._sock.sendall(header + _pad(auth_name) + _pad(auth_data))
        status, reason_len, _, _, extra = struct.unpack(
            "<BBHHH", _recv_exact(self._sock, 8)
        )
        body = _recv_exact(self._sock, extra * 4)
        if status != 1:
            reason = body[:reason_len].decode("latin-1", errors="replace")
            raise ValueError(f"X server refused connection: {reason}")
        (vendor_len,) = struct.unpack_from("<H", body, 16)
        num_formats = body[21]
        offset = 32 + vendor_len + (-vendor_len % 4) + 8 * num_formats
        (root,) = struct.unpack_from("<I", body, offset)
        return root

    def set_name(self, text: str) -> None:
        """Replace the root window's WM_NAME property."""
        data = text.encode()
        padded = _pad(data)
        request = struct.pack(
            "<BBHIIIBxxxI",
            self._CHANGE_PROPERTY,
            0,
            6 + len(padded) // 4,
            self._root,
            self._WM_NAME,
            self._STRING,
            8,
            len(data),
        )
        try:
            self._sock.sendall(request + padded)
        except OSError as exc:
            raise ComponentError("XStoreName: Allocation failed") from exc

    def close(self) -> None:
        self._sock.close()

    def __enter__(self) -> _RootWindow:
        return self

    def __exit__(self, *exc_info: object) -> None:
        try:
            self.set_name("")
        except ComponentError:
            pass
        finally:
            self.close()


@contextlib.contextmanager
def _signal_handlers(stop: threading.Event, wake: threading.Event) -> Iterator[None]:
    """Stop on SIGINT and SIGTERM; wake up early on SIGUSR1."""

    def handle(signo: int, _frame: object) -> None:
        if signo != signal.SIGUSR1:
            stop.set()
        wake.set()

    if threading.current_thread() is not threading.main_thread():
        yield
        return

    signals = (signal.SIGINT, signal.SIGTERM, signal.SIGUSR1)
    previous = {signo: signal.signal(signo, handle) for signo in signals}
    try:
        yield
    finally:
        for signo, handler in previous.items():
            signal.signal(signo, handler)


def run(
    args: Iterable[Arg],
    single: bool = False,
    once: bool = False,
    interval: int = INTERVAL,
    output: TextIO | None = None,
) -> None:
    """Update the status every ``interval`` milliseconds until told to stop."""
    layout = list(args)
    out = sys.stdout if output is None else output
    stop = threading.Event()
    wake = threading.Event()
    if once:
        stop.set()

    with contextlib.ExitStack() as stack:
        stack.enter_context(_signal_handlers(stop, wake))
        window = None if single else stack.enter_context(_RootWindow())

        while True:
            start = time.monotonic()
            status = build_status(layout, UNKNOWN_STR, MAXLEN)

            if window is None:
                try:
                    print(status, file=out, flush=True)
                except OSError as exc:
                    raise ComponentError(f"puts: {exc.strerror}") from exc
            else:
                window.set_name(status)

            if stop.is_set():
                break
            remaining = interval / 1000 - (time.monotonic() - start)
            if remaining >= 0:
                wake.wait(remaining)
                wake.clear()
            if stop.is_set():
                break


def main(argv: list[str] | None = None) -> int:
    """Run the status monitor from the command line."""
    try:
        single, once = parse_args(sys.argv[1:] if argv is None else argv)
    except UsageError as exc:
        warn(str(exc))
        return 1
    try:
        run(default_args(), single=single, once=once)
    except ComponentError as exc:
        warn(str(exc))
        return 1
    return 0