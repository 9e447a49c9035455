"""Rucksack reorganization: find misplaced items and group badges."""

from __future__ import annotations

from dataclasses import dataclass, field

_LOWERCASE_COUNT = ord("z") - ord("a") + 1


def priority(item: str) -> int:
    """Return the priority of an item: a-z are 1-26, A-Z are 27-52."""
    if "a" <= item <= "z":
        return ord(item) - ord("a") + 1
    return ord(item) - ord("A") + 1 + _LOWERCASE_COUNT


@dataclass(frozen=True)
class Rucksack:
    """The items of a rucksack, split into its two compartments."""

    first: str
    second: str

    @property
    def items(self) -> str:
        return self.first + self.second

    def common_item(self) -> str:
        """Return the first item of the second compartment also in the first."""
        in_first = set(self.first)
        for item in self.second:
            if item in in_first:
                return item
        raise ValueError("no common item in rucksack compartments")


def find_badge(first: Rucksack, second: Rucksack, third: Rucksack) -> str:
    """Return the item carried by all three rucksacks."""
    common = set(first.items) & set(second.items)
    for item in third.items:
        if item in common:
            return item
    raise ValueError("no common item in the three rucksacks")


@dataclass
class Day:
    """All rucksacks, in input order."""

    rucksacks: list[Rucksack] = field(default_factory=list)

    def solve_part_one(self) -> str:
        """Return the sum of the priorities of each rucksack's common item."""
        return str(sum(priority(rucksack.common_item()) for rucksack in self.rucksacks))

    def solve_part_two(self) -> str:
        """Return the sum of the badge priorities of each group of three."""
        groups = iter(self.rucksacks)
        return str(sum(priority(find_badge(*group)) for group in zip(groups, groups, groups)))


def _parse_rucksack(line: str) -> Rucksack:
    if len(line) % 2 != 0:
        raise ValueError(f"invalid number of items: {len(line)}")
    middle = len(line) // 2
    return Rucksack(line[:middle], line[middle:])


def parse(text: str) -> Day:
    """Parse one rucksack per line; the line count must be a multiple of three."""
    lines = text.split("\n")
    if len(lines) % 3 != 0:
        raise ValueError(f"invalid number of rucksacks: {len(lines)}")
    return Day(rucksacks=[_parse_rucksack(line) for line in lines])