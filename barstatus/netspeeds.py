"""Network throughput components based on sysfs interface statistics."""

from __future__ import annotations

import os

from .util import ComponentError, fmt_human, read_int

NET_CLASS = "/sys/class/net"
DEFAULT_INTERVAL = 1000

_COUNTER_MODULUS = 2**64


class NetSpeed:
    """Tracks a byte counter of an interface and reports bytes per second."""

    def __init__(
        self,
        direction: str,
        interval: int = DEFAULT_INTERVAL,
        root: str | os.PathLike[str] = NET_CLASS,
    ) -> None:
        if direction not in ("rx", "tx"):
            raise ValueError(f"direction must be 'rx' or 'tx', not {direction!r}")
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.direction = direction
        self.interval = interval
        self.root = root
        self._bytes = 0

    def update(self, interface: str) -> str:
        """Read the counter and return the rate since the previous reading."""
        path = os.path.join(
            os.fspath(self.root), interface, "statistics", f"{self.direction}_bytes"
        )
        current = read_int(path)
        previous, self._bytes = self._bytes, current
        if previous == 0:
            raise ComponentError(f"netspeed_{self.direction}: no previous sample")

        # The kernel counters are unsigned 64-bit and may wrap.
        delta = (current - previous) % _COUNTER_MODULUS
        return fmt_human(delta * 1000 // self.interval, 1024)


_rx = NetSpeed("rx")
_tx = NetSpeed("tx")


def netspeed_rx(interface: str) -> str:
    """Return the receive rate of ``interface`` in bytes per second."""
    return _rx.update(interface)


def netspeed_tx(interface: str) -> str:
    """Return the transmit rate of ``interface`` in bytes per second."""
    return _tx.update(interface)