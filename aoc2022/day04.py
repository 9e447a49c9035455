"""Camp cleanup: overlapping section assignments."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SectionRange:
    """An inclusive range of section IDs."""

    start: int
    end: int

    def fully_contains(self, other: SectionRange) -> bool:
        """Return whether this range covers the whole of the other."""
        return self.start <= other.start and self.end >= other.end

    def overlaps(self, other: SectionRange) -> bool:
        """Return whether either end of the other range lies inside this one."""
        return self.start <= other.start <= self.end or self.start <= other.end <= self.end


@dataclass(frozen=True)
class Assignment:
    """The section ranges given to a pair of elves."""

    first: SectionRange
    second: SectionRange


@dataclass
class Day:
    """All pairs of assignments."""

    assignments: list[Assignment] = field(default_factory=list)

    def solve_part_one(self) -> str:
        """Return how many pairs have one range fully containing the other."""
        return str(
            sum(
                a.first.fully_contains(a.second) or a.second.fully_contains(a.first)
                for a in self.assignments
            )
        )

    def solve_part_two(self) -> str:
        """Return how many pairs have overlapping ranges."""
        return str(
            sum(a.first.overlaps(a.second) or a.second.overlaps(a.first) for a in self.assignments)
        )


def _parse_range(text: str) -> SectionRange:
    bounds = text.split("-")
    if len(bounds) != 2:
        raise ValueError(f"invalid range format: {text}")
    try:
        return SectionRange(int(bounds[0]), int(bounds[1]))
    except ValueError as err:
        raise ValueError(f"could not parse range bounds: {text}") from err


def _parse_assignment(line: str) -> Assignment:
    pair = line.split(",")
    if len(pair) != 2:
        raise ValueError(f"invalid number of pairs: {len(pair)}")
    return Assignment(_parse_range(pair[0]), _parse_range(pair[1]))


def parse(text: str) -> Day:
    """Parse lines of the form '2-4,6-8'."""
    return Day(assignments=[_parse_assignment(line) for line in text.split("\n")])