"""Small text helpers used by puzzle solutions: reading, splitting, replacing, matching."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Iterable, Pattern

_INTEGER = re.compile(r"\d+")


@dataclass(frozen=True)
class Replacement:
    """A substring to look for and the text that takes its place."""

    what: str
    with_what: str


def read_lines(path: str | PathLike[str]) -> list[str]:
    """Return the lines of a file without their newline; a missing file yields no lines."""
    try:
        text = Path(path).read_text(encoding="utf-8", newline="") if hasattr(Path, "read_text") else ""
    except FileNotFoundError:
        return []
    except TypeError:
        with open(path, encoding="utf-8", newline="") as handle:
            text = handle.read()
    return _split_keep_inner(text, "\n")


def _split_keep_inner(text: str, delimiter: str) -> list[str]:
    parts = text.split(delimiter)
    if parts[-1] == "":
        parts.pop()
    return parts


def split(line: str, delimiter: str) -> list[str]:
    """Split on a single-character delimiter; a trailing empty field is dropped."""
    if len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")
    return _split_keep_inner(line, delimiter)


def replace_all(line: str, replacements: Iterable[Replacement]) -> str:
    """Apply each replacement in turn until its search text no longer occurs."""
    for replacement in replacements:
        what, with_what = replacement.what, replacement.with_what
        if not what:
            raise ValueError("replacement search text must not be empty")
        if what in line and what in with_what:
            raise ValueError(f"replacing {what!r} with {with_what!r} would never terminate")
        while what in line:
            line = line.replace(what, with_what, 1)
    return line


def replace_all_lines(lines: Iterable[str], replacements: Iterable[Replacement]) -> list[str]:
    """Apply replace_all to every line."""
    rules = list(replacements)
    return [replace_all(line, rules) for line in lines]


def all_integers(line: str) -> list[int]:
    """Return every run of decimal digits in the line as an integer (signs are ignored)."""
    return [int(match) for match in _INTEGER.findall(line)]


def extract_matches(pattern: str | Pattern[str], line: str) -> list[str]:
    """Return the captured groups of every match, in order; unmatched groups give ''."""
    regex = re.compile(pattern) if isinstance(pattern, str) else pattern
    return [group or "" for match in regex.finditer(line) for group in match.groups()]


def ends_with(value: str, ending: str) -> bool:
    """Tell whether value ends with ending."""
    return value.endswith(ending)


def abs_diff(a: int, b: int) -> int:
    """Return the distance between two numbers."""
    return max(a, b) - min(a, b)