"""Battery components backed by the Linux power-supply class in sysfs."""

from __future__ import annotations

import os
import re

from .util import ComponentError, read_int, read_text

POWER_SUPPLY = "/sys/class/power_supply"

_SIGNED = re.compile(r"\s*([+-]?\d+)")
_STATE = re.compile(r"[a-zA-Z ]{1,12}")

_STATE_SYMBOLS = {
    "Charging": "+",
    "Discharging": "-",
    "Full": "o",
    "Not charging": "o",
}


def _attribute(root: str | os.PathLike[str], bat: str, name: str) -> str:
    return os.path.join(os.fspath(root), bat, name)


def _pick(root: str | os.PathLike[str], bat: str, *names: str) -> str:
    """Return the first readable attribute among ``names``."""
    for name in names:
        path = _attribute(root, bat, name)
        if os.access(path, os.R_OK):
            return path
    raise ComponentError(f"none of {', '.join(names)} readable for '{bat}'")


def _read_state(root: str | os.PathLike[str], bat: str) -> str:
    path = _attribute(root, bat, "status")
    match = _STATE.match(read_text(path))
    if match is None:
        raise ComponentError(f"no battery state in '{path}'")
    return match.group(0)


def battery_perc(bat: str, root: str | os.PathLike[str] = POWER_SUPPLY) -> str:
    """Return the battery charge as a percentage."""
    path = _attribute(root, bat, "capacity")
    match = _SIGNED.match(read_text(path))
    if match is None:
        raise ComponentError(f"no capacity in '{path}'")
    return str(int(match.group(1)))


def battery_state(bat: str, root: str | os.PathLike[str] = POWER_SUPPLY) -> str:
    """Return '+' when charging, '-' when discharging, 'o' when full, else '?'."""
    return _STATE_SYMBOLS.get(_read_state(root, bat), "?")


def battery_remaining(bat: str, root: str | os.PathLike[str] = POWER_SUPPLY) -> str:
    """Return the time left while discharging, or an empty string otherwise."""
    state = _read_state(root, bat)
    charge_now = read_int(_pick(root, bat, "charge_now", "energy_now"))

    if state != "Discharging":
        return ""

    current_now = read_int(_pick(root, bat, "current_now", "power_now"))
    if current_now == 0:
        raise ComponentError(f"battery '{bat}' reports no discharge rate")

    timeleft = charge_now / current_now
    hours = int(timeleft)
    minutes = int((timeleft - hours) * 60)
    return f"{hours}h {minutes}m"