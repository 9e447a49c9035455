"""Cathode-ray tube: a tiny CPU driving a CRT display."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

SIGNAL_CYCLES = (20, 60, 100, 140, 180, 220)
CRT_HEIGHT = 6
CRT_WIDTH = 40


@dataclass(frozen=True)
class Noop:
    """An instruction that does nothing for one cycle."""

    def cycles(self) -> int:
        """Return how many cycles the instruction takes."""
        return 1


@dataclass(frozen=True)
class AddX:
    """An instruction that adds a value to register X after two cycles."""

    value: int

    def cycles(self) -> int:
        """Return how many cycles the instruction takes."""
        return 2


Instruction = Union[Noop, AddX]


def parse_instruction(line: str) -> Instruction:
    """Parse 'noop' or 'addx <value>'."""
    if line == "noop":
        return Noop()
    if line.startswith("addx"):
        parts = line.split(" ")
        if len(parts) != 2:
            raise ValueError(f"invalid format of addx: {line}")
        try:
            return AddX(int(parts[1]))
        except ValueError as err:
            raise ValueError(f"invalid value: {parts[1]}") from err
    raise ValueError(f"unknown instruction: {line}")


def execute(program: list[Instruction]) -> dict[int, int]:
    """Run the program and return the value of X during each cycle, counted from 1."""
    register_x = 1
    cycle = 1
    execution: dict[int, int] = {}
    for instruction in program:
        for _ in range(instruction.cycles()):
            execution[cycle] = register_x
            cycle += 1
        if isinstance(instruction, AddX):
            register_x += instruction.value
    return execution


def render(execution: dict[int, int]) -> str:
    """Draw the CRT image: a pixel is lit when the 3-wide sprite covers it."""
    rows = []
    for row in range(CRT_HEIGHT):
        pixels = []
        for column in range(CRT_WIDTH):
            sprite = execution.get(row * CRT_WIDTH + column + 1, 0)
            pixels.append("#" if sprite - 1 <= column <= sprite + 1 else ".")
        rows.append("".join(pixels))
    return "\n" + "".join(row + "\n" for row in rows)


@dataclass
class Day:
    """The program run by the CPU."""

    program: list[Instruction] = field(default_factory=list)

    def solve_part_one(self) -> str:
        """Return the sum of the signal strengths at the interesting cycles."""
        execution = execute(self.program)
        return str(sum(execution.get(cycle, 0) * cycle for cycle in SIGNAL_CYCLES))

    def solve_part_two(self) -> str:
        """Return the image drawn on the CRT."""
        return render(execute(self.program))


def parse(text: str) -> Day:
    """Parse one instruction per line."""
    return Day(program=[parse_instruction(line) for line in text.split("\n")])