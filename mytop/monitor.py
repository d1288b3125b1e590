"""Runs every stats provider to build one system snapshot."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from mytop.battery import BatteryProvider
from mytop.cpu import CpuProvider
from mytop.disk import DiskProvider
from mytop.memory import MemoryProvider
from mytop.provider import StatsProvider
from mytop.stats import SystemStats


class SystemMonitor:
    """Collects SystemStats from a fixed list of providers, in order."""

    def __init__(self, providers: Iterable[StatsProvider] | None = None) -> None:
        if providers is None:
            providers = [
                CpuProvider(),
                MemoryProvider(),
                BatteryProvider(),
                DiskProvider(),
            ]
        self.providers = list(providers)

    def collect(self) -> SystemStats:
        """Take a fresh snapshot by letting each provider fill in its part."""
        stats = SystemStats(timestamp=datetime.now())
        for provider in self.providers:
            provider.update(stats)
        return stats