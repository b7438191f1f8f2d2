"""Runs registered puzzle days and prints a summary table."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

from adventkit.executor import Day, DayExecutor

DAY_FACTORIES: dict[str, Callable[[], Day]] = {}
"""Day constructors by two-digit name, in the order they are run."""

_GREEN = "\x1b[32m"
_RED = "\x1b[31m"
_RESET = "\x1b[0m"


class DayNotFoundError(LookupError):
    """Raised when no day has the requested name."""


@dataclass
class DayInfo:
    """A day together with what running it produced."""

    day: Day
    name: str
    has_run: bool = False
    test_a_pass: bool = False
    test_b_pass: bool = False
    execution_time_a: float = 0.0
    code_a: str = ""
    execution_time_b: float = 0.0
    code_b: str = ""


def create_days() -> list[DayInfo]:
    """Build every registered day."""
    return [DayInfo(day=factory(), name=name) for name, factory in DAY_FACTORIES.items()]


def find_day_by_name(days: Iterable[DayInfo], name: str) -> DayInfo:
    """Return the day with this name; a single digit is padded with a leading zero."""
    wanted = "0" + name if len(name) == 1 and name.isdigit() else name
    for info in days:
        if info.name == wanted:
            return info
    raise DayNotFoundError("Day with the given name not found.")


def run_day(info: DayInfo) -> DayInfo:
    """Run the self-tests and both parts of a day, recording the outcome in info."""
    info.has_run = True
    executor = DayExecutor(info.day)
    info.test_a_pass = executor.execute_test_part1()
    info.test_b_pass = executor.execute_test_part2()
    first = executor.execute_part1()
    info.execution_time_a = first.execution_time
    info.code_a = first.result
    second = executor.execute_part2()
    info.execution_time_b = second.execution_time
    info.code_b = second.result
    return info


def _verdict(passed: bool) -> tuple[str, str]:
    return ("Pass", _GREEN) if passed else ("Fail", _RED)


def _border(widths: Sequence[int], left: str, right: str, joints: Sequence[str]) -> str:
    parts = [left]
    for index, width in enumerate(widths):
        parts.append("═" * (width + 2))
        parts.append(joints[index] if index < len(widths) - 1 else right)
    return "".join(parts)


def _row(widths: Sequence[int], cells: Sequence[tuple[str, int, str]]) -> str:
    line = "║"
    column = 0
    for text, span, colour in cells:
        width = sum(widths[column:column + span]) + 3 * (span - 1)
        padding = " " * (width - len(text))
        shown = f"{colour}{text}{_RESET}" if colour else text
        line += f" {shown}{padding} ║"
        column += span
    return line


def render_table(infos: Iterable[DayInfo]) -> str:
    """Return the summary table of every day that has run."""
    top = [("", 1), ("Self-test", 2), ("Part A", 2), ("Part B", 2)]
    header = ["Day", "A", "B", "Time (uS)", "Code", "Time (uS)", "Code"]
    body: list[list[tuple[str, str]]] = []
    for info in infos:
        if not info.has_run:
            continue
        body.append([
            (info.name, ""),
            _verdict(info.test_a_pass),
            _verdict(info.test_b_pass),
            (f"{info.execution_time_a:.6f}", ""),
            (info.code_a, ""),
            (f"{info.execution_time_b:.6f}", ""),
            (info.code_b, ""),
        ])

    widths = [len(text) for text in header]
    for row in body:
        widths = [max(width, len(text)) for width, (text, _) in zip(widths, row)]
    column = 0
    for text, span in top:
        available = sum(widths[column:column + span]) + 3 * (span - 1)
        if len(text) > available:
            widths[column + span - 1] += len(text) - available
        column += span

    span_ends = {0, 2, 4}
    lines = [
        _border(widths, "╔", "╗", ["╦" if i in span_ends else "═" for i in range(6)]),
        _row(widths, [(text, span, "") for text, span in top]),
        _border(widths, "╠", "╣", ["╬" if i in span_ends else "╦" for i in range(6)]),
        _row(widths, [(text, 1, "") for text in header]),
    ]
    if body:
        lines.append(_border(widths, "╠", "╣", ["╬"] * 6))
        lines.extend(_row(widths, [(text, 1, colour) for text, colour in row]) for row in body)
    lines.append(_border(widths, "╚", "╝", ["╩"] * 6))
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Run every day, or the day named by the last argument, and print the table."""
    args = list(sys.argv[1:] if argv is None else argv)
    days = create_days()
    if not args:
        for info in days:
            run_day(info)
    else:
        name = args[-1]
        try:
            info = find_day_by_name(days, name)
        except DayNotFoundError as error:
            print(error, file=sys.stderr)
            return 1
        print(f"Running Day {name}...")
        run_day(info)
    print(render_table(days))
    return 0


if __name__ == "__main__":
    sys.exit(main())