"""Monkey in the middle: track worry levels as monkeys throw items around."""

from __future__ import annotations

import heapq
import math
import re
from dataclasses import dataclass, field
from typing import Callable

PART_ONE_ROUNDS = 20
PART_TWO_ROUNDS = 10_000

_STARTING_ITEMS_RE = re.compile(r"  Starting items: (.*)")
_OPERATION_RE = re.compile(r"  Operation: new = old (.) (.*)")
_TEST_RE = re.compile(r"  Test: divisible by (\d+)")
_IF_TRUE_RE = re.compile(r"    If true: throw to monkey (\d+)")
_IF_FALSE_RE = re.compile(r"    If false: throw to monkey (\d+)")

Relief = Callable[[int], int]


@dataclass(frozen=True)
class Operation:
    """How a monkey changes the worry level of an item it inspects.

    An operand of None stands for the old worry level itself, which squares it.
    """

    operator: str
    operand: int | None = None

    def apply(self, worry_level: int) -> int:
        """Return the new worry level."""
        if self.operand is None:
            return worry_level * worry_level
        if self.operator == "*":
            return worry_level * self.operand
        return worry_level + self.operand


@dataclass(frozen=True)
class Test:
    """How a monkey decides whom to throw an item to."""

    divisible_by: int
    if_true: int
    if_false: int

    def throw_to(self, worry_level: int) -> int:
        """Return the monkey that receives an item with this worry level."""
        if worry_level % self.divisible_by == 0:
            return self.if_true
        return self.if_false


@dataclass(frozen=True)
class Monkey:
    """A monkey's starting items and its behaviour."""

    starting_items: list[int]
    operation: Operation
    test: Test


@dataclass
class Day:
    """All the monkeys, in order."""

    monkeys: list[Monkey] = field(default_factory=list)

    def monkey_business(self, rounds: int, relief: Relief) -> int:
        """Play the rounds and multiply the two highest inspection counts."""
        if len(self.monkeys) < 2:
            raise ValueError("monkey business needs at least two monkeys")
        holding = [list(monkey.starting_items) for monkey in self.monkeys]
        inspected = [0] * len(self.monkeys)
        for _ in range(rounds):
            for index, monkey in enumerate(self.monkeys):
                items, holding[index] = holding[index], []
                for worry_level in items:
                    worry_level = relief(monkey.operation.apply(worry_level))
                    holding[monkey.test.throw_to(worry_level)].append(worry_level)
                inspected[index] += len(items)
        first, second = heapq.nlargest(2, inspected)
        return first * second

    def solve_part_one(self) -> str:
        """Return the monkey business after 20 rounds with worry divided by three."""
        return str(self.monkey_business(PART_ONE_ROUNDS, lambda worry: worry // 3))

    def solve_part_two(self) -> str:
        """Return the monkey business after 10000 rounds without relief."""
        modulo = math.prod(monkey.test.divisible_by for monkey in self.monkeys)
        return str(self.monkey_business(PART_TWO_ROUNDS, lambda worry: worry % modulo))


def _match(pattern: re.Pattern[str], line: str, what: str) -> re.Match[str]:
    match = pattern.fullmatch(line)
    if match is None:
        raise ValueError(f"invalid {what} format: {line}")
    return match


def _parse_starting_items(line: str) -> list[int]:
    items = _match(_STARTING_ITEMS_RE, line, "starting items").group(1)
    try:
        return [int(item.strip()) for item in items.split(",")]
    except ValueError as err:
        raise ValueError(f"could not parse items: {items}") from err


def _parse_operation(line: str) -> Operation:
    operator, operand = _match(_OPERATION_RE, line, "operation").groups()
    if operand == "old":
        return Operation("*")
    try:
        return Operation(operator, int(operand))
    except ValueError as err:
        raise ValueError(f"could not parse operand: {operand}") from err


def _parse_test(test_line: str, if_true_line: str, if_false_line: str) -> Test:
    divisible_by = int(_match(_TEST_RE, test_line, "test").group(1))
    if_true = int(_match(_IF_TRUE_RE, if_true_line, "if true").group(1))
    if_false = int(_match(_IF_FALSE_RE, if_false_line, "if false").group(1))
    return Test(divisible_by, if_true, if_false)


def _parse_monkey(block: list[str]) -> Monkey:
    if len(block) < 6:
        raise ValueError(f"incomplete monkey description: {block}")
    return Monkey(
        starting_items=_parse_starting_items(block[1]),
        operation=_parse_operation(block[2]),
        test=_parse_test(block[3], block[4], block[5]),
    )


def parse(text: str) -> Day:
    """Parse monkey descriptions of six lines each, separated by blank lines."""
    lines = text.split("\n")
    return Day(monkeys=[_parse_monkey(lines[start : start + 6]) for start in range(0, len(lines), 7)])