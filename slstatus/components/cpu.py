"""CPU frequency and usage."""

from __future__ import annotations

from ..util import fmt_human, read_text, read_int

CPU_FREQ = "/sys/devices/system/cpu/cpu0/cpufreq/scaling_cur_freq"
PROC_STAT = "/proc/stat"

# cpu user nice system idle iowait irq softirq, from the previous sample
_previous: tuple[float, ...] | None = None


def cpu_freq(unused: str | None = None) -> str | None:
    """Current frequency of the first CPU in Hz, scaled by 1000."""
    freq = read_int(CPU_FREQ)  # in kHz
    if freq is None:
        return None
    return fmt_human(freq * 1000, 1000)


def _read_times() -> tuple[float, ...] | None:
    text = read_text(PROC_STAT)
    if text is None:
        return None
    fields = text.split()[1:8]
    if len(fields) != 7:
        return None
    try:
        return tuple(float(field) for field in fields)
    except ValueError:
        return None


def cpu_perc(unused: str | None = None) -> str | None:
    """CPU usage in percent since the previous call."""
    global _previous

    before = _previous
    now = _read_times()
    if now is None:
        return None
    _previous = now

    if before is None or before[0] == 0:
        return None

    total = sum(before) - sum(now)
    if total == 0:
        return None

    busy = (0, 1, 2, 5, 6)
    used = sum(before[i] for i in busy) - sum(now[i] for i in busy)
    return str(int(100 * used / total))