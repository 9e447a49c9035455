"""Treetop tree house: visibility and scenic scores in a grid of trees."""

from __future__ import annotations

import math
import string
from collections.abc import Iterator
from dataclasses import dataclass, field

Grid = list[list[int]]


def _lines_of_sight(grid: Grid, i: int, j: int) -> Iterator[list[int]]:
    """Yield the trees seen from (i, j) in each direction, nearest first."""
    row = grid[i]
    yield row[:j][::-1]
    yield row[j + 1 :]
    yield [grid[k][j] for k in reversed(range(i))]
    yield [grid[k][j] for k in range(i + 1, len(grid))]


def is_visible(grid: Grid, i: int, j: int) -> bool:
    """Return whether the tree at (i, j) can be seen from outside the grid."""
    height = grid[i][j]
    return any(all(tree < height for tree in line) for line in _lines_of_sight(grid, i, j))


def _viewing_distance(line: list[int], height: int) -> int:
    distance = 0
    for tree in line:
        distance += 1
        if tree >= height:
            break
    return distance


def scenic_score(grid: Grid, i: int, j: int) -> int:
    """Return the product of the viewing distances in all four directions."""
    height = grid[i][j]
    return math.prod(_viewing_distance(line, height) for line in _lines_of_sight(grid, i, j))


def _positions(grid: Grid) -> Iterator[tuple[int, int]]:
    for i, row in enumerate(grid):
        for j in range(len(row)):
            yield i, j


@dataclass
class Day:
    """The heights of the trees, row by row."""

    grid: Grid = field(default_factory=list)

    def solve_part_one(self) -> str:
        """Return how many trees are visible from outside the grid."""
        return str(sum(is_visible(self.grid, i, j) for i, j in _positions(self.grid)))

    def solve_part_two(self) -> str:
        """Return the highest scenic score of any tree."""
        scores = (scenic_score(self.grid, i, j) for i, j in _positions(self.grid))
        return str(max(scores, default=0))


def _parse_height(char: str) -> int:
    if char not in string.digits:
        raise ValueError(f"could not parse tree height: {char!r}")
    return int(char)


def parse(text: str) -> Day:
    """Parse one row of single-digit tree heights per line."""
    return Day(grid=[[_parse_height(char) for char in line] for line in text.split("\n")])