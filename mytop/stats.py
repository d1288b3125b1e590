"""Plain data records describing a snapshot of system state."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class CoreStats:
    """Usage and clock of a single CPU core."""

    coreid: int = 0
    usage_percent: float = 0.0
    frequency_mhz: float = 0.0


@dataclass
class CPUStats:
    """Aggregate processor statistics."""

    name: str = ""
    usage_percent: float = 0.0
    temperature: int = 0
    frequency_mhz: float = 0.0
    cores: list[CoreStats] = field(default_factory=list)


@dataclass
class MemoryStats:
    """Memory and swap figures, in kilobytes."""

    total: int = 0
    used: int = 0
    used_percent: float = 0.0
    free: int = 0
    available: int = 0
    cached: int = 0
    swap_total: int = 0
    swap_used: int = 0


@dataclass
class ProcessInfo:
    """Details of one running process."""

    pid: int = 0
    name: str = ""
    user: str = ""
    cpu_usage: float = 0.0
    memory_usage: int = 0
    virtual_memory: int = 0
    resident_memory: int = 0
    uptime: float = 0.0
    state: str = ""
    nice: int = 0
    priority: int = 0
    threads: int = 0
    command: str = ""


@dataclass
class BatteryStats:
    """Battery charge state; time_remaining is in minutes."""

    status: str = ""
    charge_now: int = 0
    charge_full: int = 0
    current_now: int = 0
    percentage: int = 0
    time_remaining: float = 0.0


@dataclass
class DiskStats:
    """A mounted block device and its space usage in bytes."""

    name: str = ""
    partition: str = ""
    filesystem: str = ""
    total_space: int = 0
    used_space: int = 0
    usage_percent: float = 0.0


@dataclass
class GPUStats:
    """Graphics adapter statistics."""

    name: str = ""
    usage_percent: float = 0.0
    temperature: int = 0
    memory_total: int = 0
    memory_used: int = 0


@dataclass
class SystemStats:
    """Everything gathered in one collection pass."""

    cpu: CPUStats = field(default_factory=CPUStats)
    gpu: GPUStats = field(default_factory=GPUStats)
    memory: MemoryStats = field(default_factory=MemoryStats)
    processes: list[ProcessInfo] = field(default_factory=list)
    timestamp: datetime | None = None
    battery: BatteryStats = field(default_factory=BatteryStats)
    disk: list[DiskStats] = field(default_factory=list)