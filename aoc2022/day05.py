"""Supply stacks: rearrange crates with a giant cargo crane."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

_STEP_RE = re.compile(r"move (\d+) from (\d) to (\d)")

Stacks = dict[int, list[str]]


@dataclass(frozen=True)
class Step:
    """One step of the rearrangement procedure."""

    crates: int
    source: int
    target: int


def move_crates(stacks: Stacks, source: int, target: int, amount: int) -> None:
    """Move the top ``amount`` crates from one stack to another, keeping their order."""
    if source not in stacks:
        raise ValueError(f"invalid from stack ID: {source}")
    if target not in stacks:
        raise ValueError(f"invalid to stack ID: {target}")
    from_stack = stacks[source]
    remaining = len(from_stack) - amount
    if remaining < 0:
        raise ValueError(f"stack[{source}] has only {len(from_stack)} crate(s)")
    moved = from_stack[remaining:]
    del from_stack[remaining:]
    stacks[target].extend(moved)


def top_crates(stacks: Stacks) -> str:
    """Return the crate on top of each stack, in stack order."""
    tops = []
    for stack_id in range(1, len(stacks) + 1):
        stack = stacks[stack_id]
        if not stack:
            raise ValueError(f"stack[{stack_id}] is empty")
        tops.append(stack[-1])
    return "".join(tops)


def _clone(stacks: Stacks) -> Stacks:
    return {stack_id: list(crates) for stack_id, crates in stacks.items()}


@dataclass
class Day:
    """The starting stacks and the procedure to run on them."""

    stacks: Stacks = field(default_factory=dict)
    steps: list[Step] = field(default_factory=list)

    def solve_part_one(self) -> str:
        """Return the top crates after moving crates one at a time."""
        stacks = _clone(self.stacks)
        for step in self.steps:
            for _ in range(step.crates):
                move_crates(stacks, step.source, step.target, 1)
        return top_crates(stacks)

    def solve_part_two(self) -> str:
        """Return the top crates after moving each step's crates at once."""
        stacks = _clone(self.stacks)
        for step in self.steps:
            move_crates(stacks, step.source, step.target, step.crates)
        return top_crates(stacks)


def _parse_stacks(lines: list[str]) -> Stacks:
    # Each stack takes 3 characters plus a separating space: width = 4n - 1.
    if not lines or len(lines[0]) % 4 != 3:
        raise ValueError("invalid length of stacks string")
    count = (len(lines[0]) + 1) // 4
    stacks: Stacks = {stack_id: [] for stack_id in range(1, count + 1)}
    for line in lines:
        for index in range(count):
            position = 4 * index
            if position + 1 < len(line) and line[position] == "[":
                stacks[index + 1].append(line[position + 1])
    for crates in stacks.values():
        crates.reverse()
    return stacks


def _parse_step(line: str) -> Step:
    match = _STEP_RE.fullmatch(line)
    if match is None:
        raise ValueError(f"invalid format of step string: {line}")
    crates, source, target = map(int, match.groups())
    return Step(crates, source, target)


def parse(text: str) -> Day:
    """Parse the stack drawing, a blank line, then the move steps."""
    lines = text.split("\n")
    try:
        separator = lines.index("")
    except ValueError:
        raise ValueError(
            "invalid input: no separation between stack section and rearrangement procedure"
        ) from None
    return Day(
        stacks=_parse_stacks(lines[:separator]),
        steps=[_parse_step(line) for line in lines[separator + 1 :]],
    )