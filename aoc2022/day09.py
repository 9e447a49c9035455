"""Rope bridge: simulate a rope of knots following its head."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

Position = tuple[int, int]


class Direction(Enum):
    """A direction in which the head of the rope moves."""

    RIGHT = "R"
    LEFT = "L"
    UP = "U"
    DOWN = "D"

    @property
    def delta(self) -> Position:
        return _DELTAS[self]


_DELTAS = {
    Direction.RIGHT: (1, 0),
    Direction.LEFT: (-1, 0),
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
}


@dataclass(frozen=True)
class Motion:
    """A number of steps of the head in one direction."""

    direction: Direction
    steps: int


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def follow(knot: Position, leader: Position) -> Position:
    """Return where a knot ends up after catching up with the knot ahead of it."""
    offset_x = leader[0] - knot[0]
    offset_y = leader[1] - knot[1]
    distance_x, distance_y = abs(offset_x), abs(offset_y)
    x, y = knot
    if distance_x > 1 or (distance_x > 0 and distance_y > 1):
        x += _sign(offset_x)
    if distance_y > 1 or (distance_y > 0 and distance_x > 1):
        y += _sign(offset_y)
    return x, y


class RopeBridge:
    """A rope with a fixed number of knots, all starting at the origin."""

    def __init__(self, knots: int) -> None:
        self.knots: list[Position] = [(0, 0)] * knots
        self.tail_visited: set[Position] = {(0, 0)}

    def run(self, motions: Iterable[Motion]) -> None:
        """Move the head through every motion, dragging the rest of the rope."""
        for motion in motions:
            dx, dy = motion.direction.delta
            for _ in range(motion.steps):
                head_x, head_y = self.knots[0]
                self.knots[0] = (head_x + dx, head_y + dy)
                for index in range(1, len(self.knots)):
                    self.knots[index] = follow(self.knots[index], self.knots[index - 1])
                self.tail_visited.add(self.knots[-1])

    def tail_visited_count(self) -> int:
        """Return how many distinct positions the tail has visited."""
        return len(self.tail_visited)


@dataclass
class Day:
    """The series of motions of the head."""

    motions: list[Motion] = field(default_factory=list)

    def _simulate(self, knots: int) -> str:
        bridge = RopeBridge(knots)
        bridge.run(self.motions)
        return str(bridge.tail_visited_count())

    def solve_part_one(self) -> str:
        """Return the tail positions visited by a rope of two knots."""
        return self._simulate(2)

    def solve_part_two(self) -> str:
        """Return the tail positions visited by a rope of ten knots."""
        return self._simulate(10)


def _parse_motion(line: str) -> Motion:
    parts = line.split(" ")
    if len(parts) != 2:
        raise ValueError(f"invalid format of motion: {line}")
    try:
        direction = Direction(parts[0])
    except ValueError:
        raise ValueError(f"invalid direction: {parts[0]}") from None
    try:
        steps = int(parts[1])
    except ValueError as err:
        raise ValueError(f"could not parse steps: {parts[1]}") from err
    return Motion(direction, steps)


def parse(text: str) -> Day:
    """Parse lines of the form 'R 4'."""
    return Day(motions=[_parse_motion(line) for line in text.split("\n")])