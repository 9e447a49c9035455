"""Hill climbing: shortest path up a heightmap."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field

Position = tuple[int, int]

START = "S"
END = "E"
_NEIGHBOUR_OFFSETS = ((-1, 0), (1, 0), (0, 1), (0, -1))


@dataclass
class Day:
    """The heightmap, one string of elevations per row."""

    heightmap: list[str] = field(default_factory=list)

    def _in_bounds(self, position: Position) -> bool:
        i, j = position
        return 0 <= i < len(self.heightmap) and 0 <= j < len(self.heightmap[0])

    def _at(self, position: Position) -> str:
        i, j = position
        return self.heightmap[i][j]

    def _is(self, position: Position, mark: str) -> bool:
        return self._in_bounds(position) and self._at(position) == mark

    def _is_accessible(self, current: Position, following: Position) -> bool:
        if not self._in_bounds(following):
            return False
        if self._is(current, START):
            return ord("a") + 1 >= ord(self._at(following))
        if self._is(following, END):
            return ord(self._at(current)) + 1 >= ord("z")
        return ord(self._at(current)) + 1 >= ord(self._at(following))

    def _neighbours(self, position: Position) -> Iterator[Position]:
        i, j = position
        for di, dj in _NEIGHBOUR_OFFSETS:
            following = (i + di, j + dj)
            if self._is_accessible(position, following):
                yield following

    def _positions(self) -> Iterator[Position]:
        for i, row in enumerate(self.heightmap):
            for j in range(len(row)):
                yield i, j

    def starting_position(self) -> Position:
        """Return the position marked S."""
        for position in self._positions():
            if self._at(position) == START:
                return position
        raise ValueError("starting position S not found")

    def starting_positions(self) -> list[Position]:
        """Return every position at the lowest elevation, S included."""
        return [position for position in self._positions() if self._at(position) in (START, "a")]

    def steps_to_end(self, start: Position) -> int:
        """Return the fewest steps from start to the position marked E."""
        visited = {start}
        queue = deque([(start, 0)])
        while queue:
            position, steps = queue.popleft()
            if self._is(position, END):
                return steps
            for following in self._neighbours(position):
                if following not in visited:
                    visited.add(following)
                    queue.append((following, steps + 1))
        raise ValueError("could not reach final position")

    def solve_part_one(self) -> str:
        """Return the fewest steps from S to E."""
        return str(self.steps_to_end(self.starting_position()))

    def solve_part_two(self) -> str:
        """Return the fewest steps to E from any square of elevation a."""
        best: int | None = None
        for start in self.starting_positions():
            try:
                steps = self.steps_to_end(start)
            except ValueError:
                continue
            if best is None or steps < best:
                best = steps
        if best is None:
            raise ValueError("final position is unreachable")
        return str(best)


def parse(text: str) -> Day:
    """Parse one row of elevation letters per line."""
    return Day(heightmap=text.split("\n"))