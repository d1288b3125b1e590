"""Base class for the sources that fill in parts of a SystemStats."""

from __future__ import annotations

from abc import ABC, abstractmethod

from mytop.stats import SystemStats


class StatsProvider(ABC):
    """Something that contributes figures to a SystemStats snapshot."""

    @abstractmethod
    def update(self, stats: SystemStats) -> None:
        """Fill in this provider's part of ``stats``."""