import pytest

from aoc2022.terminal import (
    ChangeDir,
    DirListing,
    File,
    ListDir,
    TerminalParseError,
    parse_terminal,
)

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


def test_example_command_count_matches_prompts():
    commands = parse_terminal(EXAMPLE)
    prompts = [line for line in EXAMPLE.splitlines() if line.startswith("$")]
    assert len(commands) == len(prompts)


def test_first_listing_entries():
    commands = parse_terminal(EXAMPLE)
    assert commands[0] == ChangeDir("/")
    assert commands[1] == ListDir(
        (
            DirListing("a"),
            File("b.txt", 14848514),
            File("c.dat", 8504156),
            DirListing("d"),
        )
    )


def test_cd_out_is_recognised():
    commands = parse_terminal("$ cd a\n$ cd ..\n")
    assert commands == [ChangeDir("a"), ChangeDir(None)]
    assert commands[1].is_out
    assert not commands[0].is_out


def test_change_dir_str():
    assert str(ChangeDir("/")) == "cd /"
    assert str(ChangeDir(None)) == "cd .."


def test_parsing_stops_at_unknown_command():
    assert parse_terminal("$ cd /\n$ foo\n$ ls\n") == [ChangeDir("/")]


def test_listing_stops_at_malformed_entry():
    assert parse_terminal("$ ls\ndir a\nx y\n") == [ListDir((DirListing("a"),))]


def test_empty_listing():
    assert parse_terminal("$ ls\n$ cd b\n") == [ListDir(), ChangeDir("b")]


@pytest.mark.parametrize("text", ["", "$ cd \n", "$ cd a", "hello\n"])
def test_no_command_raises(text):
    with pytest.raises(TerminalParseError):
        parse_terminal(text)