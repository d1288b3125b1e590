import dataclasses

from mytop.stats import (
    BatteryStats,
    CoreStats,
    CPUStats,
    DiskStats,
    MemoryStats,
    SystemStats,
)


def test_disk_lists_are_not_shared():
    first = SystemStats()
    first.disk.append(DiskStats(name="/"))
    second = SystemStats()
    assert second.disk == []
    assert len(first.disk) == 1


def test_core_lists_are_not_shared():
    first = SystemStats()
    first.cpu.cores.append(CoreStats(coreid=3))
    assert SystemStats().cpu.cores == []


def test_nested_records_are_independent():
    first = SystemStats()
    first.memory.total = 1024
    first.battery.status = "Charging"
    second = SystemStats()
    assert second.memory == MemoryStats()
    assert second.battery == BatteryStats()


def test_records_compare_by_value():
    assert DiskStats(name="/", filesystem="ext4") == DiskStats(name="/", filesystem="ext4")
    assert DiskStats(name="/") != DiskStats(name="/boot")


def test_replace_keeps_other_fields():
    cpu = CPUStats(name="Example CPU", usage_percent=12.5)
    changed = dataclasses.replace(cpu, usage_percent=40.0)
    assert changed.name == "Example CPU"
    assert changed.usage_percent == 40.0
    assert cpu.usage_percent == 12.5


def test_asdict_includes_nested_values():
    stats = SystemStats()
    stats.disk.append(DiskStats(name="/home", partition="/dev/sda2"))
    data = dataclasses.asdict(stats)
    assert data["disk"][0]["partition"] == "/dev/sda2"
    assert data["memory"]["total"] == 0