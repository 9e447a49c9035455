import pytest

from aoc2022.day05 import Day, Step, move_crates, parse, top_crates

EXAMPLE = "\n".join(
    [
        "    [D]    ",
        "[N] [C]    ",
        "[Z] [M] [P]",
        " 1   2   3 ",
        "",
        "move 1 from 2 to 1",
        "move 3 from 1 to 3",
        "move 2 from 2 to 1",
        "move 1 from 1 to 2",
    ]
)


def test_parse():
    day = parse(EXAMPLE)
    assert day.stacks == {1: ["Z", "N"], 2: ["M", "C", "D"], 3: ["P"]}
    assert day.steps == [Step(1, 2, 1), Step(3, 1, 3), Step(2, 2, 1), Step(1, 1, 2)]


def test_solve_part_one():
    assert parse(EXAMPLE).solve_part_one() == "CMZ"


def test_solve_part_two():
    assert parse(EXAMPLE).solve_part_two() == "MCD"


def test_solving_does_not_change_stacks():
    day = parse(EXAMPLE)
    day.solve_part_one()
    day.solve_part_two()
    assert day.stacks == {1: ["Z", "N"], 2: ["M", "C", "D"], 3: ["P"]}


def test_missing_separator():
    with pytest.raises(ValueError):
        parse("[A]\nmove 1 from 1 to 1")


def test_bad_stack_width():
    with pytest.raises(ValueError):
        parse("[A] \n\nmove 1 from 1 to 1")


def test_bad_step():
    with pytest.raises(ValueError):
        parse("[A]\n 1 \n\nmove one from 1 to 1")


def test_move_crates_keeps_order():
    stacks = {1: ["A", "B", "C"], 2: ["D"]}
    move_crates(stacks, 1, 2, 2)
    assert stacks == {1: ["A"], 2: ["D", "B", "C"]}


def test_move_too_many_crates():
    with pytest.raises(ValueError):
        move_crates({1: ["A"], 2: []}, 1, 2, 2)


def test_move_unknown_stack():
    with pytest.raises(ValueError):
        move_crates({1: ["A"]}, 1, 5, 1)


def test_top_crates_empty_stack():
    with pytest.raises(ValueError):
        top_crates({1: ["A"], 2: []})


def test_part_one_fails_when_stack_runs_out():
    day = Day(stacks={1: ["A"], 2: ["B"]}, steps=[Step(2, 1, 2)])
    with pytest.raises(ValueError):
        day.solve_part_one()