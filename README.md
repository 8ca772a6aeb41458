# barstatus

`barstatus` builds a one-line summary of the machine's state (CPU load,
memory, battery, date and time, and so on) and refreshes it once a second.
The line is either stored as the name of the X root window, where bars such
as those of tiling window managers pick it up, or printed to standard output.

## Installing

```
pip install .
```

## Running

```
barstatus         # set the X root window name every second
barstatus -s      # print a fresh status line to stdout every second
barstatus -1      # print one status line to stdout and exit
```

Flags may be combined (`-s1`), and `--` ends the options. Any other flag or
argument prints `usage: barstatus [-v] [-s] [-1]` to standard error and exits
with status 1.

Without `-s` or `-1`, the program connects to the display named by `DISPLAY`
(over `/tmp/.X11-unix` or TCP), authenticating with a `MIT-MAGIC-COOKIE-1`
entry from `XAUTHORITY` or `~/.Xauthority` when one is present. If no display
can be opened it reports `XOpenDisplay: Failed to open display` and exits
with status 1. On exit the root window name is cleared.

`SIGINT` and `SIGTERM` end the loop after the current update. `SIGUSR1` wakes
it early, so the line is refreshed at once.

## What is shown

The line is assembled from a list of `barstatus.config.Arg` entries. Each
entry holds a component function, a `%`-style format with one `%s`
placeholder, and an optional argument passed to the component.
`default_args()` gives the stock layout:

```
 Cpu: 7% | Vol: 45% | Mem: 3.1G/15.5G | Bat: 87%- | Mar 04, 10:42
```

The volume field runs `sndioctl -n output.level` through the shell and keeps
the first line of its output.

When a component cannot find its value, `n/a` (`config.UNKNOWN_STR`) is shown
in its place; if the failure came from the operating system, a message is also
written to standard error. The whole line is kept below 2048 bytes
(`config.MAXLEN`); a component that would overflow it is cut off and the rest
are dropped, with a warning.

## Components

Every component takes one argument (an interface name, a path, a format
string, or an unused placeholder) and returns a string. When no value is
available it raises `barstatus.util.ComponentError`.

- `barstatus.text`: `cat(path)`, `run_command(cmd)`: first line of a file
  or of a shell command's output
- `barstatus.system`: `datetime(fmt)`, `hostname`, `kernel_release`,
  `load_avg`, `uptime`, `gid`, `uid`, `username`, `entropy`, `num_files(path)`,
  `temp(file)`; also `format_uptime(seconds)`
- `barstatus.disk`: `disk_free`, `disk_perc`, `disk_total`, `disk_used`
- `barstatus.battery`: `battery_perc`, `battery_state` (`+` charging,
  `-` discharging, `o` full or not charging, `?` otherwise),
  `battery_remaining` (`"Xh Ym"` while discharging, empty otherwise)
- `barstatus.cpu`: `cpu_freq`, `cpu_perc`, and the `CpuUsage` sampler
- `barstatus.ram`: `ram_free`, `ram_perc`, `ram_total`, `ram_used`, and
  `parse_meminfo(text)`
- `barstatus.swap`: `swap_free`, `swap_perc`, `swap_total`, `swap_used`,
  `read_swap_info(path)` returning a `SwapInfo`
- `barstatus.netspeeds`: `netspeed_rx`, `netspeed_tx`, and the `NetSpeed`
  sampler
- `barstatus.network`: `ipv4`, `ipv6`, `wifi_perc`, `wifi_essid`, plus
  `rssi_to_perc` and `parse_wireless`

Components that read a file accept the file or its root directory as an extra
keyword argument (`path=` or `root=`), which makes them easy to point at test
fixtures.

Sizes are printed by `barstatus.util.fmt_human` with one decimal and an SI
(base 1000) or binary (base 1024) prefix; `fmt_human(1536, 1024)` gives
`"1.5K"`. Any other base raises `ValueError`.

Components that measure a rate (`cpu_perc`, `netspeed_rx`, `netspeed_tx`)
need two readings, so they show `n/a` on the first update, and always under
`-1`.

## Using it from Python

```python
from barstatus.cli import build_status, run
from barstatus.config import Arg, default_args
from barstatus.system import datetime, load_avg

print(build_status(default_args(), "n/a", 2048))

layout = [Arg(load_avg, "load %s | "), Arg(datetime, "%s", "%H:%M")]
run(layout, single=True, once=True)
```

`run(args, single, once, interval, output)` loops every `interval`
milliseconds, printing to `output` (standard output by default) when
`single` is true and setting the root window name otherwise.

## Limitations

- There is no configuration file: the layout is changed by passing a
  different list of `Arg` entries to `run` from Python.
- There is no built-in volume mixer component, and none for keyboard
  indicators or the keyboard layout.
- Battery, CPU, memory, swap, network-speed, temperature and wireless
  components read Linux `/proc` and `/sys` files; on other systems they
  raise `ComponentError` and the line shows `n/a`.