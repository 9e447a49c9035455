"""Regolith reservoir: sand falling into a cave of rock."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

Position = tuple[int, int]

SAND_SOURCE: Position = (500, 0)


class Material(Enum):
    """What occupies a cell of the cave."""

    ROCK = "#"
    SAND = "o"


Cave = dict[Position, Material]


def fall(position: Position, cave: Cave) -> Position:
    """Return where a unit of sand moves next, or its own position if it rests."""
    x, y = position
    for candidate in ((x, y + 1), (x - 1, y + 1), (x + 1, y + 1)):
        if candidate not in cave:
            return candidate
    return position


def _resting_sand(cave: Cave) -> int:
    return sum(material is Material.SAND for material in cave.values())


@dataclass
class Day:
    """The scanned cave, mapping positions to what fills them."""

    cave: Cave = field(default_factory=dict)

    def solve_part_one(self) -> str:
        """Return how much sand comes to rest before sand flows into the abyss."""
        cave = dict(self.cave)
        if not cave:
            return "0"
        max_y = max(y for _, y in cave)
        position = SAND_SOURCE
        while position[1] < max_y:
            following = fall(position, cave)
            if following == position:
                cave[position] = Material.SAND
                if position == SAND_SOURCE:
                    break
                position = SAND_SOURCE
                continue
            position = following
        return str(_resting_sand(cave))

    def solve_part_two(self) -> str:
        """Return how much sand comes to rest on a floor until the source is blocked."""
        cave = dict(self.cave)
        if not cave:
            raise ValueError("the cave has no rock to place the floor under")
        floor = max(y for _, y in cave) + 2
        position = SAND_SOURCE
        while cave.get(SAND_SOURCE) is not Material.SAND:
            following = fall(position, cave)
            if following[1] == floor or following == position:
                cave[position] = Material.SAND
                position = SAND_SOURCE
                continue
            position = following
        return str(_resting_sand(cave))


def _parse_position(text: str) -> Position:
    coordinates = text.split(",")
    if len(coordinates) != 2:
        raise ValueError(f"invalid position format: {text}")
    try:
        return int(coordinates[0]), int(coordinates[1])
    except ValueError as err:
        raise ValueError(f"invalid position value: {text}") from err


def _add_line_of_rock(cave: Cave, start_text: str, end_text: str) -> None:
    start = _parse_position(start_text)
    end = _parse_position(end_text)
    if start[0] == end[0]:
        low, high = sorted((start[1], end[1]))
        for y in range(low, high + 1):
            cave[(start[0], y)] = Material.ROCK
    elif start[1] == end[1]:
        low, high = sorted((start[0], end[0]))
        for x in range(low, high + 1):
            cave[(x, start[1])] = Material.ROCK
    else:
        raise ValueError(f"start ({start_text}) and end ({end_text}) don't form a straight line")


def parse(text: str) -> Day:
    """Parse rock paths of the form '498,4 -> 498,6 -> 496,6'."""
    cave: Cave = {}
    for line in text.split("\n"):
        points = line.split(" -> ")
        for start, end in zip(points, points[1:]):
            _add_line_of_rock(cave, start, end)
    return Day(cave=cave)