"""Battery state read from the power supply class directory."""

from __future__ import annotations

import os

from mytop.provider import StatsProvider
from mytop.stats import BatteryStats, SystemStats
from mytop.sysfs import find_dir_by_type, read_string, read_value


def battery_percentage(charge_now: int, charge_full: int) -> int:
    """Charge as a whole percentage of full capacity; 0 when capacity is unknown."""
    if charge_full == 0:
        return 0
    return int(100.0 * charge_now / charge_full)


def battery_time_remaining(
    status: str, charge_now: int, charge_full: int, current_now: int
) -> float:
    """Minutes until empty when discharging or full when charging, else 0."""
    if current_now > 0:
        if status == "Discharging":
            return charge_now / current_now * 60.0
        if status == "Charging":
            return (charge_full - charge_now) / current_now * 60.0
    return 0.0


class BatteryProvider(StatsProvider):
    """Reads the first battery found among the power supplies."""

    def __init__(
        self, power_supply_dir: str | os.PathLike[str] = "/sys/class/power_supply"
    ) -> None:
        self.battery_path = find_dir_by_type(power_supply_dir, ["Battery"])

    def _file(self, name: str) -> str | None:
        if self.battery_path is None:
            return None
        return os.path.join(self.battery_path, name)

    def _string(self, name: str) -> str:
        path = self._file(name)
        return "" if path is None else read_string(path)

    def _number(self, name: str) -> int:
        path = self._file(name)
        return 0 if path is None else read_value(path)

    def update(self, stats: SystemStats) -> None:
        status = self._string("status")
        charge_now = self._number("charge_now")
        charge_full = self._number("charge_full")
        current_now = self._number("current_now")
        stats.battery = BatteryStats(
            status=status,
            charge_now=charge_now,
            charge_full=charge_full,
            current_now=current_now,
            percentage=battery_percentage(charge_now, charge_full),
            time_remaining=battery_time_remaining(
                status, charge_now, charge_full, current_now
            ),
        )