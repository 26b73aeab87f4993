"""Count word frequencies in a file and print them by word or by frequency."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator, Sequence
from functools import cmp_to_key
from typing import Any, Optional, TextIO

from wordadt.words import Word, compare_by_freq, compare_by_word, read_words

_USAGE = "Usage: {prog} option FILE\n\noption\n\t-w\t\tsort by word\n\t-f\t\tsort by frequency\n"


def binary_search(
    items: Sequence[Any], key: Any, compare: Callable[[Any, Any], int]
) -> tuple[int, bool]:
    """Search sorted ``items`` for ``key``.

    Returns ``(index, True)`` when found, otherwise ``(insertion_index, False)``.
    """
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        cmp = compare(key, items[mid])
        if cmp == 0:
            return mid, True
        if cmp < 0:
            high = mid - 1
        else:
            low = mid + 1
    return low, False


class WordDictionary:
    """Words with their frequencies, kept in word order."""

    def __init__(self) -> None:
        self._words: list[Word] = []

    def add(self, word: str) -> Word:
        """Record one occurrence of ``word`` and return its entry."""
        index, found = binary_search(self._words, Word(word, 0), compare_by_word)
        if found:
            entry = self._words[index]
            entry.increase()
        else:
            entry = Word(word)
            self._words.insert(index, entry)
        return entry

    def by_frequency(self) -> list[Word]:
        """Entries ordered by descending frequency, ties by word."""
        return sorted(self._words, key=cmp_to_key(compare_by_freq))

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[Word]:
        return iter(list(self._words))


def count_words(stream: TextIO) -> WordDictionary:
    """Build a dictionary from every token of ``stream``."""
    dic = WordDictionary()
    for token in read_words(stream):
        dic.add(token)
    return dic


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        sys.stderr.write(_USAGE.format(prog="word_count"))
        return 1
    option, path = args
    if option not in ("-w", "-f"):
        sys.stderr.write(f"unknown option : {option}\n")
        return 1
    try:
        with open(path, encoding="utf-8", errors="replace") as stream:
            dic = count_words(stream)
    except OSError:
        sys.stderr.write(f"cannot open file : {path}\n")
        return 1
    entries = dic.by_frequency() if option == "-f" else list(dic)
    for entry in entries:
        sys.stdout.write(entry.format() + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())