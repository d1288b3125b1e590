"""Terminal front end that redraws system statistics once a second."""

from __future__ import annotations

import argparse
import sys
import time
from itertools import count
from typing import TextIO

from mytop.monitor import SystemMonitor
from mytop.stats import SystemStats

_DELIM = "-" * 12
_CLEAR = "\033c"


def _num(value: float | int) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def _heading(title: str) -> str:
    return f"{_DELIM}{title}{_DELIM}"


def format_stats(stats: SystemStats) -> str:
    """Render a snapshot as the text screen shown to the user."""
    cpu, memory, battery = stats.cpu, stats.memory, stats.battery
    lines = [
        _heading("CPU"),
        f"Name: {cpu.name}",
        f"Usage: {_num(cpu.usage_percent)}",
        f"Temperature: {_num(cpu.temperature)}",
        f"Freq: {_num(cpu.frequency_mhz)}",
        _heading("Memory"),
        f"Total: {memory.total} kb",
        f"Used: {_num(memory.used_percent)}%",
        f"Used: {memory.used} kb",
        f"Free: {memory.free} kb",
        f"Available: {memory.available} kb",
        f"Cached: {memory.cached} kb",
        f"Swap Total: {memory.swap_total} kb",
        f"Swap Used: {memory.swap_used} kb",
        _heading("Battery"),
        f"Status: {battery.status}",
        f"Charge now: {battery.charge_now}",
        f"Charge full: {battery.charge_full}",
        f"Current now: {battery.current_now}",
        f"Percentage: {battery.percentage}%",
        f"Time remaining: {_num(battery.time_remaining)}",
        _heading("Disks"),
    ]
    for disk in stats.disk:
        lines += [
            f"Name: {disk.name}",
            f"partition: {disk.partition}",
            f"filesystem: {disk.filesystem}",
            f"Used Space: {disk.used_space}",
            f"Total space: {disk.total_space}",
            f"Usage percent: {_num(disk.usage_percent)}%",
            "",
        ]
    return "\n".join(lines) + "\n"


def run(
    monitor: SystemMonitor | None = None,
    interval: float = 1.0,
    iterations: int | None = None,
    out: TextIO | None = None,
) -> None:
    """Clear the screen and print fresh stats every ``interval`` seconds.

    Runs forever unless ``iterations`` limits the number of screens.
    """
    if monitor is None:
        monitor = SystemMonitor()
    if out is None:
        out = sys.stdout
    rounds = count() if iterations is None else range(iterations)
    for done in rounds:
        out.write(_CLEAR)
        out.write(format_stats(monitor.collect()))
        out.flush()
        if iterations is None or done + 1 < iterations:
            time.sleep(interval)


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(
        prog="mytop", description="Show live CPU, memory, battery and disk usage."
    )
    parser.add_argument(
        "--interval", type=float, default=1.0, help="seconds between refreshes"
    )
    parser.add_argument(
        "--iterations", type=int, default=None, help="stop after this many refreshes"
    )
    args = parser.parse_args(argv)
    try:
        run(interval=args.interval, iterations=args.iterations)
    except KeyboardInterrupt:
        pass
    return 0