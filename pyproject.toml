[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mytop"
version = "0.1.0"
description = "A small terminal system monitor for Linux: CPU, memory, battery and disk usage"
requires-python = ">=3.10"
dependencies = []
keywords = ["monitor", "top", "cpu", "memory", "battery", "disk", "linux", "procfs", "sysfs"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mytop = "mytop.app:main"

[tool.hatch.build.targets.wheel]
packages = ["mytop"]

[tool.pytest.ini_options]
addopts = "-ra"
