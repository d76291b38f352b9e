import pytest

from aoc2022.filetree import (
    DirTree,
    main,
    small_dirs_total,
    smallest_to_delete,
)
from aoc2022.terminal import ChangeDir, File, ListDir, parse_terminal

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
7214296 k
"""


@pytest.fixture
def tree():
    return DirTree.build(parse_terminal(EXAMPLE))


def test_total_used(tree):
    assert tree.dir_size(tree.root) == 48381165


def test_small_dirs_total(tree):
    assert small_dirs_total(tree, 100000) == 95437


def test_smallest_to_delete(tree):
    assert smallest_to_delete(tree, 70000000, 30000000) == 24933642


def test_root_holds_replayed_root(tree):
    assert [child.name for child in tree.root.children] == ["/"]
    assert tree.dir_size(tree.root) == tree.dir_size(tree.root.children[0])


def test_walk_is_pre_order(tree):
    assert [node.name for node in tree.walk()] == ["/", "/", "a", "e", "d"]


def test_dir_size_is_files_plus_children(tree):
    for node in tree.walk():
        expected = sum(node.files.values()) + sum(
            tree.dir_size(child) for child in node.children
        )
        assert tree.dir_size(node) == expected


def test_later_listing_replaces_files():
    tree = DirTree.build(
        [
            ChangeDir("/"),
            ListDir((File("x", 5),)),
            ListDir((File("y", 7),)),
        ]
    )
    child = tree.root.children[0]
    assert child.files == {"y": 7}
    assert tree.dir_size(tree.root) == 7


@pytest.mark.parametrize(
    "commands",
    [
        [],
        [ListDir()],
        [ChangeDir(None)],
        [ChangeDir("/"), ChangeDir(None), ChangeDir(None)],
    ],
)
def test_build_errors(commands):
    with pytest.raises(ValueError):
        DirTree.build(commands)


def test_smallest_to_delete_with_enough_room(tree):
    with pytest.raises(ValueError):
        smallest_to_delete(tree, total=10**12, needed=1)


def test_smallest_to_delete_disk_too_small(tree):
    with pytest.raises(ValueError):
        smallest_to_delete(tree, total=1, needed=1)


def test_main_prints_results(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "Total under limit: 95437" in out
    assert "Delete with size: 24933642" in out