"""CPU frequency and utilisation components."""

from __future__ import annotations

import os

from .util import ComponentError, fmt_human, read_int, read_text

CPU_FREQ = "/sys/devices/system/cpu/cpu0/cpufreq/scaling_cur_freq"
PROC_STAT = "/proc/stat"

# user, nice, system, idle, iowait, irq, softirq
_FIELDS = 7
_IDLE_FIELDS = (3, 4)


class CpuUsage:
    """Computes CPU utilisation between successive samples of /proc/stat."""

    def __init__(self, path: str | os.PathLike[str] = PROC_STAT) -> None:
        self.path = path
        self._previous: tuple[float, ...] | None = None

    def _sample(self) -> tuple[float, ...]:
        fields = read_text(self.path).split()
        try:
            values = tuple(float(value) for value in fields[1 : 1 + _FIELDS])
        except ValueError as exc:
            raise ComponentError(f"malformed '{os.fspath(self.path)}'") from exc
        if len(values) != _FIELDS:
            raise ComponentError(f"malformed '{os.fspath(self.path)}'")
        return values

    def update(self) -> str:
        """Take a sample and return the busy percentage since the last one."""
        current = self._sample()
        previous, self._previous = self._previous, current

        if previous is None or previous[0] == 0:
            raise ComponentError("cpu_perc: no previous sample")

        deltas = [now - before for now, before in zip(current, previous)]
        total = sum(deltas)
        if total == 0:
            raise ComponentError("cpu_perc: no time elapsed")

        busy = sum(
            delta for index, delta in enumerate(deltas) if index not in _IDLE_FIELDS
        )
        return str(int(100 * busy / total))


_usage = CpuUsage()


def cpu_freq(unused: str | None = None, path: str | os.PathLike[str] = CPU_FREQ) -> str:
    """Return the current frequency of the first CPU."""
    khz = read_int(path)
    return fmt_human(khz * 1000, 1000)


def cpu_perc(unused: str | None = None) -> str:
    """Return the CPU utilisation since the previous call."""
    return _usage.update()