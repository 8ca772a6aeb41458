"""The status line layout and its defaults."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from .battery import battery_perc, battery_state
from .cpu import cpu_perc
from .ram import ram_total, ram_used
from .system import datetime
from .text import run_command
from .util import ComponentError, warn

# Interval between updates, in milliseconds.
INTERVAL = 1000
# Text shown when a component cannot produce a value.
UNKNOWN_STR = "n/a"
# Maximum length of the status line, including its terminator.
MAXLEN = 2048

VOLUME_COMMAND = (
    r"sndioctl -n output.level | sed 's/0\.//' | sed 's/.$/%/' | sed 's/\.//'"
)


@dataclass(frozen=True)
class Arg:
    """One component of the status line: a function, a format and its argument."""

    func: Callable[[Optional[str]], str]
    fmt: str
    args: Optional[str] = None

    def render(self, unknown: str = UNKNOWN_STR) -> str:
        """Run the component and substitute its value into the format."""
        try:
            value = self.func(self.args)
        except ComponentError as exc:
            if isinstance(exc.__cause__, OSError):
                warn(str(exc))
            value = unknown
        return self.fmt % value


def default_args() -> list[Arg]:
    """Return the default status line layout."""
    return [
        Arg(cpu_perc, " Cpu: %s%% |"),
        Arg(run_command, " Vol: %s |", VOLUME_COMMAND),
        Arg(ram_used, " Mem: %s/"),
        Arg(ram_total, "%s |"),
        Arg(battery_perc, " Bat: %s%%", "BAT0"),
        Arg(battery_state, "%s |", "BAT0"),
        Arg(datetime, " %s,", "%b %d"),
        Arg(datetime, " %s ", "%I:%M"),
    ]