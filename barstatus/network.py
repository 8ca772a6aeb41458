"""Network address and wireless link components."""

from __future__ import annotations

import array
import fcntl
import os
import re
import socket
import struct

import psutil

from .util import ComponentError, read_text

SIOCGIWESSID = 0x8B1B
IW_ESSID_MAX_SIZE = 32
IFNAMSIZ = 16
# Highest link quality reported by /proc/net/wireless.
MAX_LINK_QUALITY = 70

_IWREQ_SIZE = 32
_LINK = re.compile(r"\s*[+-]?\d+\s+([+-]?\d+)")


def _ip(interface: str, family: int) -> str:
    try:
        addresses = psutil.net_if_addrs()
    except OSError as exc:
        raise ComponentError(f"getifaddrs: {exc.strerror}") from exc
    for entry in addresses.get(interface, ()):
        if entry.family == family:
            return entry.address
    raise ComponentError(f"no address of family {family!r} on '{interface}'")


def ipv4(interface: str) -> str:
    """Return the first IPv4 address of ``interface``."""
    return _ip(interface, socket.AF_INET)


def ipv6(interface: str) -> str:
    """Return the first IPv6 address of ``interface``."""
    return _ip(interface, socket.AF_INET6)


def rssi_to_perc(rssi: int) -> int:
    """Map a signal strength in dBm to a percentage."""
    if rssi >= -50:
        return 100
    if rssi <= -100:
        return 0
    return 2 * (rssi + 100)


def parse_wireless(text: str, interface: str) -> int:
    """Return the link quality of ``interface`` from a /proc/net/wireless listing."""
    lines = text.splitlines()
    if len(lines) < 3:
        raise ComponentError("wireless listing has no interface line")
    line = lines[2]
    start = line.find(interface)
    if start < 0:
        raise ComponentError(f"'{interface}' not in wireless listing")
    match = _LINK.match(line[start + len(interface) + 2 :])
    if match is None:
        raise ComponentError(f"no link quality for '{interface}'")
    return int(match.group(1))


def wifi_perc(interface: str, root: str | os.PathLike[str] = "/") -> str:
    """Return the link quality of a wireless interface as a percentage."""
    base = os.fspath(root)
    operstate = read_text(os.path.join(base, "sys", "class", "net", interface, "operstate"))
    if not operstate.startswith("up\n"):
        raise ComponentError(f"interface '{interface}' is not up")
    wireless = read_text(os.path.join(base, "proc", "net", "wireless"))
    quality = parse_wireless(wireless, interface)
    return str(int(quality / MAX_LINK_QUALITY * 100))


def wifi_essid(interface: str) -> str:
    """Return the ESSID a wireless interface is associated with."""
    name = interface.encode()
    if len(name) >= IFNAMSIZ:
        raise ComponentError(f"interface name '{interface}' too long")

    essid = array.array("B", bytes(IW_ESSID_MAX_SIZE + 1))
    address, _ = essid.buffer_info()
    packed = struct.pack("16sPHH", name, address, IW_ESSID_MAX_SIZE + 1, 0)
    request = bytearray(packed.ljust(max(_IWREQ_SIZE, len(packed)), b"\0"))

    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    except OSError as exc:
        raise ComponentError(f"socket 'AF_INET': {exc.strerror}") from exc
    with sock:
        try:
            fcntl.ioctl(sock.fileno(), SIOCGIWESSID, request, True)
        except OSError as exc:
            raise ComponentError(f"ioctl 'SIOCGIWESSID': {exc.strerror}") from exc

    value = essid.tobytes().split(b"\0", 1)[0]
    if not value:
        raise ComponentError(f"'{interface}' has no ESSID")
    return value.decode("utf-8", errors="replace")