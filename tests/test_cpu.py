import pytest

from mytop.cpu import (
    CpuProvider,
    CpuTime,
    count_cores,
    cpu_usage,
    parse_cpu_time_line,
    parse_cpu_times,
    read_cpu_name,
)
from mytop.stats import SystemStats

STAT = (
    "cpu  10 1 5 100 4 0 2 0 0 0\n"
    "cpu0 6 1 3 50 2 0 1 0 0 0\n"
    "cpu1 4 0 2 50 2 0 1 0 0 0\n"
    "intr 12345\n"
    "cpu9 1 1 1 1 1 1 1 1\n"
)


def test_parse_line_fields():
    t = parse_cpu_time_line("cpu 1 2 3 4 5 6 7 8 9 10")
    assert t == CpuTime(1, 2, 3, 4, 5, 6, 7, 8)
    assert t.total() == 1 + 2 + 3 + 4 + 5 + 6 + 7 + 8
    assert t.idle_time() == 4 + 5


def test_parse_line_stops_at_bad_token():
    t = parse_cpu_time_line("cpu 7 x 3 4")
    assert t == CpuTime(user=7)


def test_parse_cpu_times_stops_at_first_other_line():
    times = parse_cpu_times(STAT)
    assert len(times) == 3
    assert times[1].user == 6


def test_cpu_usage_no_change_is_zero():
    t = CpuTime(1, 2, 3, 4)
    assert cpu_usage(t, t) == 0.0


def test_cpu_usage_fully_busy_and_idle():
    start = CpuTime()
    assert cpu_usage(start, CpuTime(user=40)) == 100.0
    assert cpu_usage(start, CpuTime(idle=30, iowait=10)) == 0.0


def test_cpu_usage_within_bounds():
    usage = cpu_usage(CpuTime(), CpuTime(user=3, idle=9, system=2))
    assert 0.0 < usage < 100.0


def test_read_cpu_name(tmp_path):
    info = tmp_path / "cpuinfo"
    info.write_text("processor\t: 0\nmodel name\t: Fake Chip 9000\nflags\t: x\n")
    assert read_cpu_name(info) == "Fake Chip 9000"


def test_read_cpu_name_missing(tmp_path):
    assert read_cpu_name(tmp_path / "absent") == "Unknown CPU"


def test_count_cores(tmp_path):
    for name in ("cpu0", "cpu1", "cpufreq", "cpuidle"):
        (tmp_path / name).mkdir()
    (tmp_path / "cpu7").write_text("")
    assert count_cores(tmp_path) == 2


def test_count_cores_missing_dir(tmp_path):
    with pytest.raises(OSError):
        count_cores(tmp_path / "absent")


@pytest.fixture
def fake_system(tmp_path):
    stat = tmp_path / "stat"
    stat.write_text(STAT)
    info = tmp_path / "cpuinfo"
    info.write_text("model name\t: Fake Chip\n")
    cpu_dir = tmp_path / "cpu"
    for core in range(2):
        freq = cpu_dir / f"cpu{core}" / "cpufreq"
        freq.mkdir(parents=True)
        (freq / "scaling_cur_freq").write_text("2400000\n")
    thermal = tmp_path / "thermal"
    (thermal / "zone0").mkdir(parents=True)
    (thermal / "zone0" / "type").write_text("acpitz\n")
    (thermal / "zone1").mkdir()
    (thermal / "zone1" / "type").write_text("x86_pkg_temp\n")
    (thermal / "zone1" / "temp").write_text("45000\n")
    return stat, info, cpu_dir, thermal


def test_provider_update(fake_system):
    stat, info, cpu_dir, thermal = fake_system
    provider = CpuProvider(stat, info, cpu_dir, thermal, interval=0)
    stats = SystemStats()
    provider.update(stats)
    assert stats.cpu.name == "Fake Chip"
    assert stats.cpu.temperature == 45
    assert stats.cpu.frequency_mhz == 2400000
    assert stats.cpu.usage_percent == 0.0
    assert len(stats.cpu.cores) == 2
    assert all(core.frequency_mhz == 2400.0 for core in stats.cpu.cores)


def test_provider_core_count_mismatch(fake_system):
    stat, info, cpu_dir, thermal = fake_system
    (cpu_dir / "cpu2").mkdir()
    provider = CpuProvider(stat, info, cpu_dir, thermal, interval=0)
    stats = SystemStats()
    provider.update(stats)
    assert stats.cpu.cores == []
    assert stats.cpu.name == "Fake Chip"


def test_provider_without_stat_leaves_cpu_untouched(fake_system, tmp_path):
    _, info, cpu_dir, thermal = fake_system
    provider = CpuProvider(tmp_path / "absent", info, cpu_dir, thermal, interval=0)
    stats = SystemStats()
    provider.update(stats)
    assert stats.cpu.name == ""
    assert stats.cpu.cores == []


def test_provider_without_thermal_zone(fake_system, tmp_path):
    stat, info, cpu_dir, _ = fake_system
    empty = tmp_path / "nothermal"
    empty.mkdir()
    provider = CpuProvider(stat, info, cpu_dir, empty, interval=0)
    stats = SystemStats()
    provider.update(stats)
    assert provider.thermal_path is None
    assert stats.cpu.temperature == 0