"""Tuning trouble: find markers in a datastream."""

from __future__ import annotations

from dataclasses import dataclass

START_OF_PACKET_MARKER_SIZE = 4
START_OF_MESSAGE_MARKER_SIZE = 14


def first_marker_end(buffer: str, size: int) -> int | None:
    """Return the position just after the first window of ``size`` distinct characters.

    The window ending at the very end of the buffer is not considered.
    Returns None when there is no such window.
    """
    for start in range(len(buffer) - size):
        if len(set(buffer[start : start + size])) == size:
            return start + size
    return None


def start_of_packet_marker(buffer: str) -> int | None:
    """Return where the first start-of-packet marker ends."""
    return first_marker_end(buffer, START_OF_PACKET_MARKER_SIZE)


def start_of_message_marker(buffer: str) -> int | None:
    """Return where the first start-of-message marker ends."""
    return first_marker_end(buffer, START_OF_MESSAGE_MARKER_SIZE)


@dataclass
class Day:
    """The received datastream buffer."""

    buffer: str = ""

    def solve_part_one(self) -> str:
        """Return the end of the first start-of-packet marker."""
        marker = start_of_packet_marker(self.buffer)
        if marker is None:
            raise ValueError("could not find start of packet marker")
        return str(marker)

    def solve_part_two(self) -> str:
        """Return the end of the first start-of-message marker."""
        marker = start_of_message_marker(self.buffer)
        if marker is None:
            raise ValueError("could not find start of message marker")
        return str(marker)


def parse(text: str) -> Day:
    """Take the whole input as the datastream buffer."""
    return Day(buffer=text)