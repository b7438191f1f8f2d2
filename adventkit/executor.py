"""The interface every puzzle day implements, and a timed runner for it."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable


class Day(ABC):
    """One puzzle day: two answers and a self-test for each."""

    @abstractmethod
    def part1(self) -> str:
        """Return the answer to the first part."""

    @abstractmethod
    def part2(self) -> str:
        """Return the answer to the second part."""

    @abstractmethod
    def test_part1(self) -> bool:
        """Tell whether the first part gives the expected answer on the example."""

    @abstractmethod
    def test_part2(self) -> bool:
        """Tell whether the second part gives the expected answer on the example."""


@dataclass(frozen=True)
class PartResult:
    """The answer to one part and how long it took, in microseconds."""

    execution_time: float
    result: str


class DayExecutor:
    """Runs the parts of a day, timing the real answers."""

    def __init__(self, day: Day) -> None:
        self.day = day

    @staticmethod
    def _timed(part: Callable[[], str]) -> PartResult:
        start = time.perf_counter()
        result = part()
        elapsed = time.perf_counter() - start
        return PartResult(execution_time=elapsed * 1_000_000, result=result)

    def execute_part1(self) -> PartResult:
        """Run and time the first part."""
        return self._timed(self.day.part1)

    def execute_part2(self) -> PartResult:
        """Run and time the second part."""
        return self._timed(self.day.part2)

    def execute_test_part1(self) -> bool:
        """Run the self-test of the first part."""
        return self.day.test_part1()

    def execute_test_part2(self) -> bool:
        """Run the self-test of the second part."""
        return self.day.test_part2()