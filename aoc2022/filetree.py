"""Build a directory tree from a terminal session and measure directory sizes."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from aoc2022.terminal import ChangeDir, Command, File, parse_terminal

LIMIT = 100_000
NEEDED_FREE = 30_000_000
TOTAL_FS = 70_000_000


@dataclass
class Dir:
    """A directory node with its own files and sub-directories."""

    name: str
    files: dict[str, int] = field(default_factory=dict)
    children: list[Dir] = field(default_factory=list)


class DirTree:
    """A tree of directories rooted at ``root``."""

    def __init__(self, root: Dir) -> None:
        self.root = root

    @classmethod
    def build(cls, commands: Iterable[Command]) -> DirTree:
        """Replay a session; every ``cd`` into a name creates a new node.

        The opening ``cd`` names the root and is then replayed like any
        other command, so the root holds one child of the same name.
        """
        commands = list(commands)
        if not commands:
            raise ValueError("the session is empty")
        first = commands[0]
        if not isinstance(first, ChangeDir) or first.target is None:
            raise ValueError("the session must start by changing into a directory")
        root = Dir(first.target)
        path = [root]
        for command in commands:
            if isinstance(command, ChangeDir):
                if command.target is None:
                    if len(path) == 1:
                        raise ValueError("cannot leave the root directory")
                    path.pop()
                else:
                    child = Dir(command.target)
                    path[-1].children.append(child)
                    path.append(child)
            else:
                path[-1].files = {
                    entry.name: entry.size
                    for entry in command.entries
                    if isinstance(entry, File)
                }
        return cls(root)

    def dir_size(self, node: Dir) -> int:
        """Total size of the files in ``node`` and everything below it."""
        return sum(node.files.values()) + sum(self.dir_size(c) for c in node.children)

    def walk(self) -> Iterator[Dir]:
        """Yield every directory in pre-order, starting with the root."""
        stack = [self.root]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))


def small_dirs_total(tree: DirTree, limit: int = LIMIT) -> int:
    """Sum of the sizes of all directories no larger than ``limit``."""
    return sum(size for size in map(tree.dir_size, tree.walk()) if size <= limit)


def smallest_to_delete(
    tree: DirTree, total: int = TOTAL_FS, needed: int = NEEDED_FREE
) -> int:
    """Size of the smallest directory whose removal frees ``needed`` space."""
    used = tree.dir_size(tree.root)
    if used > total:
        raise ValueError(f"used space {used} exceeds the disk size {total}")
    free = total - used
    if free > needed:
        raise ValueError(f"already {free} free, more than the {needed} needed")
    delete_at_least = needed - free
    candidates = [s for s in map(tree.dir_size, tree.walk()) if s >= delete_at_least]
    if not candidates:
        raise ValueError("no directory is large enough")
    return min(candidates)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Measure directory sizes.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)
    tree = DirTree.build(parse_terminal(args.input.read_text()))
    print(f"Total under limit: {small_dirs_total(tree)}")
    print(f"Delete with size: {smallest_to_delete(tree)}")
    return 0