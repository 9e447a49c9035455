"""Calorie counting: find the elves carrying the most food."""

from __future__ import annotations

import heapq
from dataclasses import dataclass, field


@dataclass
class Day:
    """The food items carried by each elf, as lists of calories."""

    elves: list[list[int]] = field(default_factory=list)

    def _totals(self) -> list[int]:
        return [sum(items) for items in self.elves]

    def solve_part_one(self) -> str:
        """Return the most calories carried by a single elf."""
        return str(max([0, *self._totals()]))

    def solve_part_two(self) -> str:
        """Return the calories carried by the top three elves together."""
        top_three = heapq.nlargest(3, self._totals())
        return str(sum(max(total, 0) for total in top_three))


def _parse_calories(line: str) -> int:
    try:
        return int(line)
    except ValueError as err:
        raise ValueError(f"could not parse calories: {line!r}") from err


def parse(text: str) -> Day:
    """Parse groups of calorie lines separated by blank lines."""
    lines = text.split("\n")
    elves: list[list[int]] = []
    current: list[int] = []
    for line in lines:
        if line:
            current.append(_parse_calories(line))
        else:
            elves.append(current)
            current = []
    if lines[-1]:
        elves.append(current)
    return Day(elves=elves)