"""Processor usage, temperature and clock figures from procfs and sysfs."""

from __future__ import annotations

import os
import re
import time
from dataclasses import dataclass, fields

from mytop.provider import StatsProvider
from mytop.stats import CoreStats, SystemStats
from mytop.sysfs import find_dir_by_type, read_value

_CORE_DIR = re.compile(r"cpu\d+")
_THERMAL_KEYWORDS = ("x86_pkg_temp",)


@dataclass
class CpuTime:
    """Cumulative jiffies spent in each state, as listed in /proc/stat."""

    user: int = 0
    nice: int = 0
    system: int = 0
    idle: int = 0
    iowait: int = 0
    irq: int = 0
    softirq: int = 0
    steal: int = 0

    def total(self) -> int:
        """All jiffies counted for this CPU."""
        return (
            self.user
            + self.nice
            + self.system
            + self.idle
            + self.iowait
            + self.irq
            + self.softirq
            + self.steal
        )

    def idle_time(self) -> int:
        """Jiffies spent idle or waiting on I/O."""
        return self.idle + self.iowait


def parse_cpu_time_line(line: str) -> CpuTime:
    """Parse one ``cpu`` line; fields after the first unreadable one stay 0."""
    values: dict[str, int] = {}
    for spec, token in zip(fields(CpuTime), line.split()[1:]):
        try:
            values[spec.name] = int(token)
        except ValueError:
            break
    return CpuTime(**values)


def parse_cpu_times(text: str) -> list[CpuTime]:
    """Parse the leading run of ``cpu`` lines: the aggregate first, then each core."""
    times: list[CpuTime] = []
    for line in text.splitlines():
        if not line.startswith("cpu"):
            break
        times.append(parse_cpu_time_line(line))
    return times


def cpu_usage(t1: CpuTime, t2: CpuTime) -> float:
    """Percentage of non-idle time between two snapshots."""
    total_delta = t2.total() - t1.total()
    idle_delta = t2.idle_time() - t1.idle_time()
    if total_delta <= 0:
        return 0.0
    return 100.0 * (total_delta - idle_delta) / total_delta


def read_cpu_name(cpuinfo_path: str | os.PathLike[str] = "/proc/cpuinfo") -> str:
    """Return the first ``model name`` in a cpuinfo file, or ``Unknown CPU``."""
    try:
        with open(cpuinfo_path, encoding="utf-8", errors="replace") as handle:
            for line in handle:
                line = line.rstrip("\n")
                if "model name" in line:
                    return line[line.find(":") + 2 :]
    except OSError:
        pass
    return "Unknown CPU"


def count_cores(cpu_dir: str | os.PathLike[str] = "/sys/devices/system/cpu") -> int:
    """Count ``cpuN`` subdirectories. Raises OSError if the directory is unreadable."""
    with os.scandir(cpu_dir) as entries:
        return sum(
            1
            for entry in entries
            if entry.is_dir() and _CORE_DIR.fullmatch(entry.name)
        )


class CpuProvider(StatsProvider):
    """Samples processor counters twice and reports usage between the samples."""

    def __init__(
        self,
        proc_stat_path: str | os.PathLike[str] = "/proc/stat",
        cpuinfo_path: str | os.PathLike[str] = "/proc/cpuinfo",
        cpu_dir: str | os.PathLike[str] = "/sys/devices/system/cpu",
        thermal_dir: str | os.PathLike[str] = "/sys/class/thermal",
        interval: float = 0.1,
    ) -> None:
        self.proc_stat_path = proc_stat_path
        self.cpu_dir = cpu_dir
        self.interval = interval
        self.name = read_cpu_name(cpuinfo_path)
        self.cores_amount = count_cores(cpu_dir)
        zone = find_dir_by_type(thermal_dir, _THERMAL_KEYWORDS)
        self.thermal_path = None if zone is None else os.path.join(zone, "temp")
        self.freq_path = self._core_freq_path(0)

    def _core_freq_path(self, core: int) -> str:
        return os.path.join(self.cpu_dir, f"cpu{core}", "cpufreq", "scaling_cur_freq")

    def _snapshot(self) -> list[CpuTime]:
        try:
            with open(self.proc_stat_path, encoding="utf-8", errors="replace") as handle:
                return parse_cpu_times(handle.read())
        except OSError:
            return []

    def _temperature(self) -> int:
        if self.thermal_path is None:
            return 0
        return int(read_value(self.thermal_path, 0, int) / 1000)

    def _core_stats(self, t1: list[CpuTime], t2: list[CpuTime]) -> list[CoreStats]:
        expected = self.cores_amount + 1
        if len(t1) != expected or len(t2) != expected:
            return []
        return [
            CoreStats(
                usage_percent=cpu_usage(before, after),
                frequency_mhz=read_value(self._core_freq_path(core), 0.0, float)
                / 1000.0,
            )
            for core, (before, after) in enumerate(zip(t1[1:], t2[1:]))
        ]

    def update(self, stats: SystemStats) -> None:
        first = self._snapshot()
        time.sleep(self.interval)
        second = self._snapshot()
        if not first or not second:
            return
        stats.cpu.name = self.name
        stats.cpu.usage_percent = cpu_usage(first[0], second[0])
        stats.cpu.temperature = self._temperature()
        stats.cpu.frequency_mhz = int(read_value(self.freq_path, 0.0, float))
        stats.cpu.cores = self._core_stats(first, second)