import pytest

from aoc2022.day04 import Assignment, Day, SectionRange, parse

EXAMPLE = """2-4,6-8
2-3,4-5
5-7,7-9
2-8,3-7
6-6,4-6
2-6,4-8"""


def test_parse_example():
    expected = Day(
        assignments=[
            Assignment(SectionRange(2, 4), SectionRange(6, 8)),
            Assignment(SectionRange(2, 3), SectionRange(4, 5)),
            Assignment(SectionRange(5, 7), SectionRange(7, 9)),
            Assignment(SectionRange(2, 8), SectionRange(3, 7)),
            Assignment(SectionRange(6, 6), SectionRange(4, 6)),
            Assignment(SectionRange(2, 6), SectionRange(4, 8)),
        ]
    )
    assert parse(EXAMPLE) == expected


def test_solve_part_one():
    assert parse(EXAMPLE).solve_part_one() == "2"


def test_solve_part_two():
    assert parse(EXAMPLE).solve_part_two() == "4"


def test_fully_contains():
    assert SectionRange(2, 8).fully_contains(SectionRange(3, 7))
    assert not SectionRange(3, 7).fully_contains(SectionRange(2, 8))


def test_overlaps_is_one_sided_for_enclosing_range():
    inner = SectionRange(3, 7)
    outer = SectionRange(2, 8)
    assert outer.overlaps(inner)
    assert not inner.overlaps(outer)


def test_disjoint_ranges_do_not_overlap():
    assert not SectionRange(2, 4).overlaps(SectionRange(6, 8))


@pytest.mark.parametrize("text", ["2-4", "2-4,6-8,1-1", "2-4,6", "a-4,6-8"])
def test_parse_rejects_malformed_lines(text):
    with pytest.raises(ValueError):
        parse(text)