"""Mounted block devices from the mount table and their space usage."""

from __future__ import annotations

import os

from mytop.provider import StatsProvider
from mytop.stats import DiskStats, SystemStats


def parse_mtab_line(line: str) -> DiskStats:
    """Read device, mount point and filesystem type from one mount table line."""
    fields = line.split()
    fields += [""] * (3 - len(fields))
    partition, name, filesystem = fields[:3]
    return DiskStats(name=name, partition=partition, filesystem=filesystem)


def parse_mtab(text: str) -> list[DiskStats]:
    """Return an entry for each mount whose device lives under /dev/."""
    return [
        parse_mtab_line(line)
        for line in text.splitlines()
        if line.startswith("/dev/")
    ]


def fill_disk_usage(disk: DiskStats) -> None:
    """Set the space figures of ``disk`` from its mount point; left as is on error."""
    try:
        info = os.statvfs(disk.name)
    except (OSError, ValueError):
        return
    total = info.f_blocks * info.f_frsize
    available = info.f_bavail * info.f_frsize
    used = total - available
    disk.total_space = total
    disk.used_space = used
    disk.usage_percent = used / total * 100.0 if total else 0.0


class DiskProvider(StatsProvider):
    """Lists mounted devices and how full they are."""

    def __init__(self, mtab_path: str | os.PathLike[str] = "/etc/mtab") -> None:
        self.mtab_path = mtab_path

    def update(self, stats: SystemStats) -> None:
        try:
            with open(self.mtab_path, encoding="utf-8", errors="replace") as handle:
                text = handle.read()
        except OSError:
            text = ""
        disks = parse_mtab(text)
        for disk in disks:
            fill_disk_usage(disk)
        stats.disk.extend(disks)