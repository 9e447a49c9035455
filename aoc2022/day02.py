"""Rock paper scissors tournament scoring."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable


class Shape(Enum):
    """A hand shape."""

    ROCK = "Rock"
    PAPER = "Paper"
    SCISSORS = "Scissors"

    def score(self) -> int:
        """Return the points awarded for playing this shape."""
        return _SHAPE_SCORES[self]

    def beats(self, other: Shape) -> bool:
        """Return whether this shape defeats the other."""
        return _BEATS[self] is other


_SHAPE_SCORES = {Shape.ROCK: 1, Shape.PAPER: 2, Shape.SCISSORS: 3}
_BEATS = {Shape.ROCK: Shape.SCISSORS, Shape.PAPER: Shape.ROCK, Shape.SCISSORS: Shape.PAPER}
_LOSES_TO = {loser: winner for winner, loser in _BEATS.items()}


@dataclass(frozen=True)
class Round:
    """One line of the strategy guide, still encrypted."""

    column1: str
    column2: str

    def score(self, decrypt: Decrypt) -> tuple[int, int]:
        """Return the scores of both players once the round is decrypted."""
        shape1, shape2 = decrypt(self)
        if shape1 is shape2:
            outcome1, outcome2 = 3, 3
        elif shape1.beats(shape2):
            outcome1, outcome2 = 6, 0
        else:
            outcome1, outcome2 = 0, 6
        return outcome1 + shape1.score(), outcome2 + shape2.score()


Decrypt = Callable[[Round], "tuple[Shape, Shape]"]

_PART_ONE_SHAPES = {
    "A": Shape.ROCK,
    "X": Shape.ROCK,
    "B": Shape.PAPER,
    "Y": Shape.PAPER,
    "C": Shape.SCISSORS,
    "Z": Shape.SCISSORS,
}

_OPPONENT_SHAPES = {"A": Shape.ROCK, "B": Shape.PAPER, "C": Shape.SCISSORS}


def decrypt_part_one(round_: Round) -> tuple[Shape, Shape]:
    """Read both columns as shapes."""
    try:
        shape1 = _PART_ONE_SHAPES[round_.column1]
    except KeyError:
        raise ValueError(f"could not decrypt first shape: invalid shape: {round_.column1}") from None
    try:
        shape2 = _PART_ONE_SHAPES[round_.column2]
    except KeyError:
        raise ValueError(f"could not decrypt second shape: invalid shape: {round_.column2}") from None
    return shape1, shape2


def decrypt_part_two(round_: Round) -> tuple[Shape, Shape]:
    """Read the second column as the desired outcome: X lose, Y draw, Z win."""
    opponent = _OPPONENT_SHAPES.get(round_.column1)
    if opponent is not None:
        if round_.column2 == "X":
            return opponent, _BEATS[opponent]
        if round_.column2 == "Y":
            return opponent, opponent
        if round_.column2 == "Z":
            return opponent, _LOSES_TO[opponent]
    raise ValueError(f"invalid shapes: {round_.column1} {round_.column2}")


@dataclass
class Day:
    """The full strategy guide."""

    strategy_guide: list[Round] = field(default_factory=list)

    def _total_score(self, decrypt: Decrypt) -> int:
        return sum(round_.score(decrypt)[1] for round_ in self.strategy_guide)

    def solve_part_one(self) -> str:
        """Return the total score reading both columns as shapes."""
        return str(self._total_score(decrypt_part_one))

    def solve_part_two(self) -> str:
        """Return the total score reading the second column as an outcome."""
        return str(self._total_score(decrypt_part_two))


def _parse_round(line: str) -> Round:
    columns = line.split(" ")
    if len(columns) != 2:
        raise ValueError(f"invalid number of columns: {len(columns)}")
    return Round(columns[0], columns[1])


def parse(text: str) -> Day:
    """Parse a strategy guide with two space-separated columns per line."""
    return Day(strategy_guide=[_parse_round(line) for line in text.split("\n")])