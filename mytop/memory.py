"""Memory figures read from /proc/meminfo."""

from __future__ import annotations

import os

from mytop.provider import StatsProvider
from mytop.stats import MemoryStats, SystemStats


def parse_meminfo(text: str) -> dict[str, int]:
    """Map each meminfo key to its numeric value; malformed lines are skipped."""
    data: dict[str, int] = {}
    for line in text.splitlines():
        fields = line.split()
        if len(fields) < 2:
            continue
        key = fields[0].removesuffix(":")
        try:
            data[key] = int(fields[1])
        except ValueError:
            continue
    return data


def memory_stats(data: dict[str, int]) -> MemoryStats:
    """Build MemoryStats from parsed meminfo values; absent keys count as 0."""
    total = data.get("MemTotal", 0)
    free = data.get("MemFree", 0)
    cached = data.get("Cached", 0)
    available = data.get("MemAvailable", 0)
    swap_total = data.get("SwapTotal", 0)
    swap_free = data.get("SwapFree", 0)
    used = total - free - cached
    used_percent = used / total * 100 if total else 0.0
    return MemoryStats(
        total=total,
        used=used,
        used_percent=used_percent,
        free=free,
        available=available,
        cached=cached,
        swap_total=swap_total,
        swap_used=swap_total - swap_free,
    )


class MemoryProvider(StatsProvider):
    """Reads memory usage from a meminfo file."""

    def __init__(self, meminfo_path: str | os.PathLike[str] = "/proc/meminfo") -> None:
        self.meminfo_path = meminfo_path

    def update(self, stats: SystemStats) -> None:
        try:
            with open(self.meminfo_path, encoding="utf-8", errors="replace") as handle:
                text = handle.read()
        except OSError:
            text = ""
        stats.memory = memory_stats(parse_meminfo(text))