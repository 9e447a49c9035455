"""Distress signal: compare and sort nested packets."""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from enum import Enum
from functools import cmp_to_key
from typing import Union

Value = Union[int, "list[Value]"]
PacketPair = tuple[Value, Value]


class Outcome(Enum):
    """The result of comparing two values."""

    RIGHT_ORDER = "right order"
    WRONG_ORDER = "wrong order"
    KEEP_CHECKING = "keep checking"


def _is_int(text: str) -> bool:
    return bool(text) and all(char in string.digits for char in text)


def _split_by_outer_commas(text: str) -> list[str]:
    parts = []
    depth = 0
    start = 0
    for index, char in enumerate(text):
        if char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
        elif char == "," and depth == 0:
            parts.append(text[start:index])
            start = index + 1
    parts.append(text[start:])
    return parts


def parse_packet(text: str) -> Value:
    """Parse an integer or a bracketed, comma-separated list of values."""
    if _is_int(text):
        return int(text)
    if not text.startswith("["):
        raise ValueError(f"invalid value format, must start with [: {text!r}")
    if len(text) < 2 or not text.endswith("]"):
        raise ValueError(f"invalid value format, must end with ]: {text!r}")
    inner = text[1:-1]
    if not inner:
        return []
    return [parse_packet(part) for part in _split_by_outer_commas(inner)]


def compare(left: Value, right: Value) -> Outcome:
    """Compare two values by the packet ordering rules."""
    if isinstance(left, int) and isinstance(right, int):
        if left == right:
            return Outcome.KEEP_CHECKING
        return Outcome.RIGHT_ORDER if left < right else Outcome.WRONG_ORDER
    if isinstance(left, int):
        return compare([left], right)
    if isinstance(right, int):
        return compare(left, [right])
    for left_item, right_item in zip(left, right):
        outcome = compare(left_item, right_item)
        if outcome is not Outcome.KEEP_CHECKING:
            return outcome
    if len(left) == len(right):
        return Outcome.KEEP_CHECKING
    return Outcome.RIGHT_ORDER if len(left) < len(right) else Outcome.WRONG_ORDER


def is_in_right_order(left: Value, right: Value) -> bool:
    """Return whether the pair is strictly in the right order."""
    return compare(left, right) is Outcome.RIGHT_ORDER


def _packet_order(left: Value, right: Value) -> int:
    """Sort comparator: packets in the right order come first, all others after."""
    outcome = compare(left, right)
    if outcome is Outcome.RIGHT_ORDER:
        return -1
    return 1


@dataclass
class Day:
    """The received pairs of packets."""

    packet_pairs: list[PacketPair] = field(default_factory=list)

    def decoder_key(self) -> int:
        """Sort all packets with the two dividers and multiply the dividers' positions."""
        divider_two: Value = [[2]]
        divider_six: Value = [[6]]
        packets = [divider_two, divider_six]
        for left, right in self.packet_pairs:
            packets.extend((left, right))
        packets.sort(key=cmp_to_key(_packet_order))
        position_two = next(i for i, p in enumerate(packets, 1) if p is divider_two)
        position_six = next(i for i, p in enumerate(packets, 1) if p is divider_six)
        return position_two * position_six

    def solve_part_one(self) -> str:
        """Return the sum of the 1-based indices of the pairs in the right order."""
        return str(
            sum(
                index
                for index, (left, right) in enumerate(self.packet_pairs, 1)
                if is_in_right_order(left, right)
            )
        )

    def solve_part_two(self) -> str:
        """Return the decoder key."""
        return str(self.decoder_key())


def parse(text: str) -> Day:
    """Parse pairs of packet lines separated by blank lines."""
    lines = text.split("\n")
    pairs: list[PacketPair] = []
    for start in range(0, len(lines), 3):
        if start + 1 >= len(lines):
            raise ValueError("could not parse packet pair: missing right packet")
        pairs.append((parse_packet(lines[start]), parse_packet(lines[start + 1])))
    return Day(packet_pairs=pairs)