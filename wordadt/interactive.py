"""Interactive word-frequency browser over a sorted list or a binary search tree."""

from __future__ import annotations

import enum
import sys
from collections.abc import Sequence
from typing import Optional, TextIO, Union

from wordadt.bst import BinarySearchTree
from wordadt.dlist import SortedList
from wordadt.words import Word, compare_by_word, read_words

Container = Union[SortedList, BinarySearchTree]

_WHITESPACE = " \t\n\v\f\r"


class Action(enum.Enum):
    QUIT = "Q"
    FORWARD_PRINT = "P"
    BACKWARD_PRINT = "B"
    TREE_PRINT = "T"
    SEARCH = "S"
    DELETE = "D"
    COUNT = "C"


def parse_action(char: str, with_tree: bool = False) -> Optional[Action]:
    """Map one input character to an action; None when it names none."""
    if len(char) != 1:
        return None
    try:
        action = Action(char.upper())
    except ValueError:
        return None
    if action is Action.TREE_PRINT and not with_tree:
        return None
    return action


def _insert(container: Container, item: Word) -> bool:
    if isinstance(container, BinarySearchTree):
        return container.insert(item, Word.increase)
    return container.add(item, Word.increase)


def _remove(container: Container, key: Word) -> Word:
    if isinstance(container, BinarySearchTree):
        return container.delete(key)
    return container.remove(key)


def load_words(stream: TextIO, container: Container) -> Container:
    """Add every token of ``stream`` to ``container``, counting repeats."""
    for token in read_words(stream):
        _insert(container, Word(token))
    return container


class _Input:
    """Reads single characters or whitespace-delimited tokens from a stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending = ""

    def char(self) -> str:
        if self._pending:
            ch, self._pending = self._pending, ""
            return ch
        return self._stream.read(1)

    def token(self) -> Optional[str]:
        ch = self.char()
        while ch and ch in _WHITESPACE:
            ch = self.char()
        if not ch:
            return None
        chars = []
        while ch and ch not in _WHITESPACE:
            chars.append(ch)
            ch = self.char()
        self._pending = ch
        return "".join(chars)


class Session:
    """Command loop that prints, searches, deletes and counts stored words."""

    def __init__(self, container: Container, with_tree: bool = False) -> None:
        self.container = container
        self.with_tree = with_tree
        tree = "T)ree print, " if with_tree else ""
        self._prompt = f"Select Q)uit, P)rint, B)ackward print, {tree}S)earch, D)elete, C)ount: "

    def run(self, stdin: TextIO, stdout: TextIO, stderr: TextIO) -> int:
        """Process commands from ``stdin`` until quit or end of input."""
        source = _Input(stdin)
        stderr.write(self._prompt)
        while True:
            ch = source.char()
            if not ch:
                self.container.clear()
                return 0
            action = parse_action(ch, self.with_tree)
            if action is Action.QUIT:
                self.container.clear()
                return 0
            if action is Action.FORWARD_PRINT:
                for item in self.container:
                    stdout.write(item.format() + "\n")
            elif action is Action.BACKWARD_PRINT:
                for item in reversed(self.container):
                    stdout.write(item.format() + "\n")
            elif action is Action.TREE_PRINT:
                stdout.write(self.container.render(lambda item: item.word + "\n"))
            elif action in (Action.SEARCH, Action.DELETE):
                stderr.write("Input a word to find: ")
                word = source.token()
                if word is None:
                    self.container.clear()
                    return 0
                if action is Action.SEARCH:
                    found = self.container.search(Word(word))
                    if found is not None:
                        stdout.write(found.format() + "\n")
                    else:
                        stdout.write(f"{word} not found\n")
                else:
                    try:
                        removed = _remove(self.container, Word(word))
                    except KeyError:
                        stdout.write(f"{word} not found\n")
                    else:
                        stdout.write(f"{removed.word}\t{removed.freq} deleted\n")
            elif action is Action.COUNT:
                stdout.write(f"{len(self.container)}\n")
            if action is not None:
                stderr.write(self._prompt)


def _run(argv: Optional[Sequence[str]], prog: str, container: Container, with_tree: bool) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        sys.stderr.write(f"usage: {prog} FILE\n")
        return 1
    path = args[0]
    try:
        with open(path, encoding="utf-8", errors="replace") as stream:
            load_words(stream, container)
    except OSError:
        sys.stderr.write(f"Error: cannot open file [{path}]\n")
        return 2
    return Session(container, with_tree).run(sys.stdin, sys.stdout, sys.stderr)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Browse the words of a file kept in a sorted list."""
    return _run(argv, "word_list", SortedList(compare_by_word), with_tree=False)


def tree_main(argv: Optional[Sequence[str]] = None) -> int:
    """Browse the words of a file kept in a binary search tree."""
    return _run(argv, "word_tree", BinarySearchTree(compare_by_word), with_tree=True)


if __name__ == "__main__":
    sys.exit(main())