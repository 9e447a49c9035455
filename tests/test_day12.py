import pytest

from aoc2022 import day12

EXAMPLE = """Sabqponm
abcryxxl
accszExk
acctuvwj
abdefghi"""


def example_day():
    return day12.Day(heightmap=["Sabqponm", "abcryxxl", "accszExk", "acctuvwj", "abdefghi"])


def test_parse():
    assert day12.parse(EXAMPLE) == example_day()


def test_solve_part_one():
    assert example_day().solve_part_one() == "31"


def test_solve_part_two():
    assert example_day().solve_part_two() == "29"


def test_starting_position():
    assert example_day().starting_position() == (0, 0)


def test_starting_positions_include_s_and_a():
    positions = example_day().starting_positions()
    assert (0, 0) in positions
    assert (0, 1) in positions
    assert (0, 2) not in positions
    assert len(positions) == 6


def test_steps_to_end_from_start():
    day = example_day()
    assert day.steps_to_end((0, 0)) == 31


def test_straight_climb():
    day = day12.parse("SbcdefghijklmnopqrstuvwxyzE")
    assert day.solve_part_one() == "26"
    assert day.solve_part_two() == "26"


def test_missing_start_raises():
    with pytest.raises(ValueError):
        day12.parse("abcE").solve_part_one()


def test_unreachable_end_raises():
    day = day12.parse("SaE")
    with pytest.raises(ValueError):
        day.solve_part_one()
    with pytest.raises(ValueError):
        day.solve_part_two()