# slstatus

A small status monitor. Every second it builds one line of text out of
components such as the date and time, battery charge, memory use or network
speed, and either stores it as the name of the X root window (where a window
manager such as dwm shows it in its bar) or prints it to standard output.

## Installing

```
pip install .
```

No third-party libraries are needed. Talking to the X server is done over
the X11 protocol directly (`slstatus.xdisplay`), using `$DISPLAY` and the
`MIT-MAGIC-COOKIE-1` entry from `$XAUTHORITY` or `~/.Xauthority`.

## Running

```
slstatus          # set the root window name every second
slstatus -s       # print the status line to stdout every second instead
slstatus -1       # print the status line to stdout once and exit
slstatus -v       # print the version to stderr and exit
```

Flags may be combined (`-s1`); `--` ends the flags. Any other flag or a
positional argument prints a usage message and exits with status 1.

`SIGINT` and `SIGTERM` end the loop; `SIGUSR1` cuts the current wait short and
triggers an immediate update. When writing to the root window, the name is
cleared on exit.

The command shows a fixed line: the date and time (`%F %T`) followed by the
charge of batteries `BAT0` and `BAT1`, for example
`2024-01-01 12:00:00 BAT0 87% BAT1 n/a% `. To show anything else, build the
line yourself from Python as described below.

## Components

Each component takes one string argument and returns a string, or `None` when
no value could be read; `None` is shown as `n/a`. Failures are reported on
standard error.

| module in `slstatus.components` | functions | shows | argument |
| --- | --- | --- | --- |
| `battery` | `battery_perc`, `battery_remaining`, `battery_state` | charge in percent, time left as `Hh Mm`, `+`/`-`/`o`/`?` | battery name (`BAT0`) |
| `cat` | `cat` | first line of a file | path |
| `cpu` | `cpu_freq`, `cpu_perc` | CPU frequency, usage since the previous call | unused |
| `clock` | `datetime` | date and time | `strftime` format (`%F %T`) |
| `disk` | `disk_free`, `disk_perc`, `disk_total`, `disk_used` | disk space | mount point (`/`) |
| `entropy` | `entropy` | available entropy | unused |
| `hostname` | `hostname` | host name | unused |
| `ip` | `ipv4`, `ipv6` | interface address | interface (`eth0`) |
| `kernel_release` | `kernel_release` | `uname -r` | unused |
| `keyboard_indicators` | `keyboard_indicators`, `render_indicators` | caps/num lock state | format (`c?n?`) |
| `load_avg` | `load_avg` | 1, 5 and 15 minute load average | unused |
| `netspeeds` | `netspeed_rx`, `netspeed_tx` | receive/transmit speed since the previous call | interface (`wlan0`) |
| `num_files` | `num_files` | number of entries in a directory | path |
| `ram` | `ram_free`, `ram_perc`, `ram_total`, `ram_used` | memory | unused |
| `run_command` | `run_command` | first line of a shell command's output | command |
| `swap` | `swap_free`, `swap_perc`, `swap_total`, `swap_used` | swap | unused |
| `temperature` | `temp` | whole degrees Celsius | sensor file holding millidegrees |
| `uptime` | `uptime` | time since boot as `Hh Mm` | unused |
| `user` | `gid`, `uid`, `username` | current user | unused |
| `volume` | `vol_perc` | OSS master volume | mixer device (`/dev/mixer`) |
| `wifi` | `wifi_essid`, `wifi_perc`, `link_quality` | WiFi network name and signal | interface (`wlan0`) |

`cpu_perc`, `netspeed_rx` and `netspeed_tx` compare with the previous call, so
their first call returns `None`.

`keyboard_indicators` format: `c` for caps lock and `n` for num lock, in
either case, each optionally followed by `?`. Without `?` the letter is always
shown, lowercase when off and uppercase when on; with `?` it is shown as
written only when on. `render_indicators(fmt, led_mask)` does the same for a
given LED mask (bit 0 caps lock, bit 1 num lock):

```python
from slstatus.components.keyboard_indicators import render_indicators

render_indicators("cn", 0b01)    # "Cn"
render_indicators("c?n?", 0b10)  # "n"
```

Example:

```python
from slstatus.components.battery import battery_perc
from slstatus.components.clock import datetime

print(datetime("%F %T"), battery_perc("BAT0"))
```

## Building your own status line

`slstatus.cli` holds the pieces the command is made of: `Arg` (a component,
a printf-style format taking one `%s`, and the component's argument),
`Options` (`single` to print to stdout, `once` to stop after one line),
`build_status(args, unknown, maxlen)` and `run(options, args, out)`.

```python
import sys
from slstatus.cli import Arg, Options, build_status, run
from slstatus.components.clock import datetime
from slstatus.components.ram import ram_perc

args = [
    Arg(ram_perc, "RAM %s%% ", None),
    Arg(datetime, "%s", "%F %T"),
]
print(build_status(args, "n/a", 2048))
run(Options(single=True, once=True), args, sys.stdout)
```

`build_status` keeps the line below `maxlen` bytes; an entry that does not fit
is cut and the rest are dropped, with a warning on standard error.

Byte sizes are shown with binary prefixes: `fmt_human(2048, 1024)` from
`slstatus.util` returns `"2.0 Ki"`, and `fmt_human(1500, 1000)` returns
`"1.5 k"`.

## What it does not do

- There is no configuration file and no option to choose components; the
  `slstatus` command always shows the date, time and two battery charges.
  Other lines need a few lines of Python as shown above.
- There is no keyboard layout (keymap) component.
- Components read Linux interfaces (`/sys`, `/proc`, OSS ioctls and wireless
  ioctls). There are no OpenBSD or FreeBSD implementations; apart from
  `entropy`, which reports `∞` there, they return `None` on those systems.