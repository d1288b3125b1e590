# mytop

`mytop` is a small terminal system monitor for Linux. It clears the screen
and prints a fresh snapshot every second (or at the interval you choose):

- **CPU**: the model name, overall usage in percent, the package temperature
  in degrees Celsius (from the `x86_pkg_temp` thermal zone) and the value of
  `cpu0/cpufreq/scaling_cur_freq`.
- **Memory**: total, used (total minus free minus cached), used percent,
  free, available and cached memory, and swap total and used, all in kB.
- **Battery**: the status, the charge now and when full, the current draw,
  the percentage, and the minutes left to empty (discharging) or to full
  (charging).
- **Disks**: every mount in `/etc/mtab` whose device is under `/dev/`, with
  its mount point, device, filesystem type, used and total space in bytes,
  and usage percent.

All figures come from `/proc`, `/sys` and `/etc/mtab`; the package has no
dependencies outside the standard library.

## Installation

```
pip install .
```

## Usage

```
mytop
mytop --interval 2
mytop --iterations 5
```

- `--interval SECONDS` sets the pause between refreshes (default `1.0`).
- `--iterations N` stops after `N` screens; without it the screen refreshes
  until you press `Ctrl+C`.

## Using it as a library

Each data source is a provider, a subclass of `mytop.provider.StatsProvider`
whose `update(stats)` fills in its part of a `mytop.stats.SystemStats`
record. `mytop.monitor.SystemMonitor` runs a list of providers in order and
returns a new snapshot, stamped with the current time, on each `collect()`.
With no list it uses `CpuProvider`, `MemoryProvider`, `BatteryProvider` and
`DiskProvider`.

```python
from mytop.monitor import SystemMonitor
from mytop.app import format_stats

monitor = SystemMonitor()
stats = monitor.collect()
print(stats.memory.used_percent)
print(format_stats(stats))
```

A provider can also be used on its own, and every provider takes the paths
it reads as constructor arguments, so it can be pointed at other files:

```python
from mytop.stats import SystemStats
from mytop.memory import MemoryProvider

stats = SystemStats()
MemoryProvider("/proc/meminfo").update(stats)
print(stats.memory.total, "kb")
```

`CpuProvider` reads `/proc/stat` twice, `interval` seconds apart (default
`0.1`), and reports usage over that span, overall and for each core in
`stats.cpu.cores`.

`mytop.app.run(monitor, interval, iterations, out)` drives the refresh loop
and can write to any text stream.

Helpers that work on plain values, without a live system:

- `mytop.memory`: `parse_meminfo`, `memory_stats`
- `mytop.disk`: `parse_mtab_line`, `parse_mtab`, `fill_disk_usage`
- `mytop.cpu`: `CpuTime`, `parse_cpu_time_line`, `parse_cpu_times`,
  `cpu_usage`, `read_cpu_name`, `count_cores`
- `mytop.battery`: `battery_percentage`, `battery_time_remaining`
- `mytop.sysfs`: `read_value`, `read_string`, `find_dir_by_type`

Note that the default `CpuProvider` and `BatteryProvider` list
`/sys/devices/system/cpu`, `/sys/class/thermal` and `/sys/class/power_supply`
when created, and raise `OSError` where those directories do not exist.

## What it does not do

- It shows no process list and no GPU figures. `ProcessInfo` and `GPUStats`
  records exist in `mytop.stats`, but no provider fills them in.
- The per-core figures are collected but not printed on the screen.
- The screen is plain output: there are no keys for sorting, filtering or
  scrolling.

## Running the tests

```
pip install .[test]
pytest
```