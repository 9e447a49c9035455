"""No space left on device: directory sizes from terminal output."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field

TOTAL_DISK_SPACE = 70_000_000
UNUSED_SPACE_NEEDED = 30_000_000
SMALL_DIRECTORY_LIMIT = 100_000

_FILE_RE = re.compile(r"(\d+) (.+)")


@dataclass(eq=False)
class Node:
    """A file (non-zero size) or a directory (size zero) in the file system."""

    name: str
    size: int = 0
    parent: Node | None = field(default=None, repr=False)
    children: list[Node] = field(default_factory=list)

    def is_directory(self) -> bool:
        """Return whether this node is a directory."""
        return self.size == 0

    def add_child(self, child: Node) -> Node:
        """Attach a child to this node and return it."""
        child.parent = self
        self.children.append(child)
        return child


def directory_sizes(root: Node) -> dict[str, int]:
    """Return the total size below every node.

    Keys are the names along the path from the root concatenated together,
    so the root is "/" and its child "a" is "/a". Files map to zero.
    """
    sizes: dict[str, int] = {}

    def visit(node: Node, path: str) -> int:
        absolute = path + node.name
        if absolute in sizes:
            return sizes[absolute]
        total = 0
        for child in node.children:
            if not child.is_directory():
                total += child.size
            total += visit(child, absolute)
        sizes[absolute] = total
        return total

    visit(root, "")
    return sizes


@dataclass
class Day:
    """The reconstructed file system."""

    file_system: Node = field(default_factory=lambda: Node(name="/"))

    def solve_part_one(self) -> str:
        """Return the sum of the sizes of all directories of at most 100000."""
        sizes = directory_sizes(self.file_system)
        return str(sum(size for size in sizes.values() if size <= SMALL_DIRECTORY_LIMIT))

    def solve_part_two(self) -> str:
        """Return the size of the smallest directory that frees enough space."""
        sizes = directory_sizes(self.file_system)
        unused = TOTAL_DISK_SPACE - sizes["/"]
        if unused >= UNUSED_SPACE_NEEDED:
            raise ValueError("no directory needs to be deleted to run the update")
        for size in sorted(sizes.values()):
            if unused + size >= UNUSED_SPACE_NEEDED:
                return str(size)
        raise ValueError("can't run the update as there is not enough space")


def _is_command(line: str) -> bool:
    return line.startswith("$")


def _command_blocks(lines: list[str]) -> Iterator[list[str]]:
    """Group the lines after the first into commands followed by their output."""
    block: list[str] = []
    for line in lines[1:]:
        if block and _is_command(line):
            yield block
            block = []
        block.append(line)
    if block:
        yield block


def _list(output: list[str], current: Node) -> None:
    for line in output:
        if line.startswith("dir"):
            current.add_child(Node(name=line[4:]))
            continue
        match = _FILE_RE.search(line)
        if match is None:
            raise ValueError(f"invalid list file output: {line}")
        current.add_child(Node(name=match.group(2), size=int(match.group(1))))


def _change_directory(line: str, current: Node) -> Node:
    if line == "$ cd ..":
        if current.parent is None:
            raise ValueError(f"directory {current.name} has no parent")
        return current.parent
    name = line[5:]
    for child in current.children:
        if child.name == name:
            return child
    raise ValueError(f"could not find {name} directory in current directory {current.name}")


def parse(text: str) -> Day:
    """Rebuild the file system from a terminal session that starts at the root."""
    root = Node(name="/")
    current = root
    for block in _command_blocks(text.split("\n")):
        if block[0] == "$ ls":
            _list(block[1:], current)
        else:
            current = _change_directory(block[0], current)
    return Day(file_system=root)