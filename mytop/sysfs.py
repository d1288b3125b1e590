"""Helpers for reading small values from procfs and sysfs files."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable
from typing import TypeVar

T = TypeVar("T")


def read_value(
    path: str | os.PathLike[str],
    default: T = 0,
    convert: Callable[[str], T] = int,
) -> T:
    """Return the first whitespace-separated token of a file, converted.

    The default is returned when the file cannot be read, is empty,
    or its first token does not convert.
    """
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            text = handle.read()
    except OSError:
        return default
    tokens = text.split(maxsplit=1)
    if not tokens:
        return default
    try:
        return convert(tokens[0])
    except (ValueError, TypeError):
        return default


def read_string(path: str | os.PathLike[str], default: str = "") -> str:
    """Return the first line of a file without its newline, or the default."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            line = handle.readline()
    except OSError:
        return default
    if not line:
        return default
    return line.rstrip("\n")


def find_dir_by_type(
    base_path: str | os.PathLike[str], keywords: Iterable[str]
) -> str | None:
    """Find a subdirectory whose ``type`` file mentions one of the keywords.

    Subdirectories are examined in name order. Raises OSError if the
    base directory cannot be listed.
    """
    wanted = list(keywords)
    with os.scandir(base_path) as entries:
        directories = sorted(
            (entry for entry in entries if entry.is_dir()), key=lambda e: e.name
        )
    for entry in directories:
        try:
            with open(
                os.path.join(entry.path, "type"), encoding="utf-8", errors="replace"
            ) as handle:
                kind = handle.readline().rstrip("\n")
        except OSError:
            continue
        if any(keyword in kind for keyword in wanted):
            return entry.path
    return None