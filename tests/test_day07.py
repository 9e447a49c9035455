import pytest

from aoc2022.day07 import Day, Node, directory_sizes, parse

EXAMPLE = """$ cd /
$ ls
dir a
14848514 b.txt
8504156 c.dat
dir d
$ cd a
$ ls
dir e
29116 f
2557 g
62596 h.lst
$ cd e
$ ls
584 i
$ cd ..
$ cd ..
$ cd d
$ ls
4060174 j
8033020 d.log
5626152 d.ext
7214296 k"""


def _file_system() -> Node:
    root = Node(name="/")
    directory_a = root.add_child(Node(name="a"))
    root.add_child(Node(name="b.txt", size=14848514))
    root.add_child(Node(name="c.dat", size=8504156))
    directory_d = root.add_child(Node(name="d"))
    directory_e = directory_a.add_child(Node(name="e"))
    directory_e.add_child(Node(name="i", size=584))
    directory_a.add_child(Node(name="f", size=29116))
    directory_a.add_child(Node(name="g", size=2557))
    directory_a.add_child(Node(name="h.lst", size=62596))
    directory_d.add_child(Node(name="j", size=4060174))
    directory_d.add_child(Node(name="d.log", size=8033020))
    directory_d.add_child(Node(name="d.ext", size=5626152))
    directory_d.add_child(Node(name="K", size=7214296))
    return root


def test_solve_part_one():
    assert Day(file_system=_file_system()).solve_part_one() == "95437"


def test_solve_part_two():
    assert Day(file_system=_file_system()).solve_part_two() == "24933642"


def test_parse_builds_tree():
    root = parse(EXAMPLE).file_system
    assert [child.name for child in root.children] == ["a", "b.txt", "c.dat", "d"]
    directory_a = root.children[0]
    assert directory_a.is_directory()
    assert directory_a.parent is root
    assert [child.name for child in directory_a.children] == ["e", "f", "g", "h.lst"]
    assert directory_a.children[0].children[0].size == 584


def test_parsed_answers():
    day = parse(EXAMPLE)
    assert day.solve_part_one() == "95437"
    assert day.solve_part_two() == "24933642"


def test_directory_sizes():
    sizes = directory_sizes(_file_system())
    assert sizes["/"] == 48381165
    assert sizes["/a"] == 94853
    assert sizes["/ae"] == 584
    assert sizes["/d"] == 24933642


def test_add_child_sets_parent():
    parent = Node(name="p")
    child = parent.add_child(Node(name="c", size=3))
    assert child.parent is parent
    assert parent.children == [child]
    assert not child.is_directory()


def test_cd_into_unknown_directory():
    with pytest.raises(ValueError):
        parse("$ cd /\n$ cd missing")


def test_invalid_listing():
    with pytest.raises(ValueError):
        parse("$ cd /\n$ ls\nnonsense")


def test_part_two_without_need_to_delete():
    root = Node(name="/")
    root.add_child(Node(name="x", size=10))
    with pytest.raises(ValueError):
        Day(file_system=root).solve_part_two()