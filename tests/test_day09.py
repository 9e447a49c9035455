import pytest

from aoc2022.day09 import Day, Direction, Motion, RopeBridge, follow, parse

R, L, U, D = Direction.RIGHT, Direction.LEFT, Direction.UP, Direction.DOWN

FIRST_MOTIONS = [
    Motion(R, 4), Motion(U, 4), Motion(L, 3), Motion(D, 1),
    Motion(R, 4), Motion(D, 1), Motion(L, 5), Motion(R, 2),
]

SECOND_MOTIONS = [
    Motion(R, 5), Motion(U, 8), Motion(L, 8), Motion(D, 3),
    Motion(R, 17), Motion(D, 10), Motion(L, 25), Motion(U, 20),
]


def test_parse():
    text = "R 4\nU 4\nL 3\nD 1\nR 4\nD 1\nL 5\nR 2"
    assert parse(text) == Day(motions=FIRST_MOTIONS)


def test_solve_part_one():
    assert Day(motions=FIRST_MOTIONS).solve_part_one() == "13"


def test_solve_part_two():
    assert Day(motions=SECOND_MOTIONS).solve_part_two() == "36"


def test_solve_part_two_small_example():
    assert Day(motions=FIRST_MOTIONS).solve_part_two() == "1"


@pytest.mark.parametrize(
    "knot, leader, expected",
    [
        ((0, 0), (1, 1), (0, 0)),
        ((0, 0), (0, 0), (0, 0)),
        ((0, 0), (2, 0), (1, 0)),
        ((0, 0), (0, -2), (0, -1)),
        ((0, 0), (2, 1), (1, 1)),
        ((0, 0), (-1, 2), (-1, 1)),
        ((0, 0), (2, 2), (1, 1)),
    ],
)
def test_follow(knot, leader, expected):
    assert follow(knot, leader) == expected


def test_rope_bridge_counts_start_position():
    bridge = RopeBridge(2)
    bridge.run([])
    assert bridge.tail_visited_count() == 1


def test_rope_bridge_straight_line():
    bridge = RopeBridge(2)
    bridge.run([Motion(R, 5)])
    assert bridge.tail_visited_count() == 5
    assert bridge.knots == [(5, 0), (4, 0)]


def test_invalid_direction():
    with pytest.raises(ValueError):
        parse("X 4")


def test_invalid_format():
    with pytest.raises(ValueError):
        parse("R4")


def test_invalid_steps():
    with pytest.raises(ValueError):
        parse("R four")