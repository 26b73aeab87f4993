"""The word record shared by the word-counting tools, with its orderings and reader."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TextIO

_WORD_RE = re.compile(r"[^ \t\n\v\f\r]+")


@dataclass
class Word:
    """A word and how many times it has been seen."""

    word: str
    freq: int = 1

    def increase(self) -> None:
        """Count one more occurrence."""
        self.freq += 1

    def format(self) -> str:
        """Render as ``word<TAB>freq``."""
        return f"{self.word}\t{self.freq}"


def _cmp(a: str, b: str) -> int:
    return (a > b) - (a < b)


def compare_by_word(a: Word, b: Word) -> int:
    """Three-way comparison by word text."""
    return _cmp(a.word, b.word)


def compare_by_freq(a: Word, b: Word) -> int:
    """Three-way comparison: higher frequency first, then by word text."""
    if a.freq != b.freq:
        return b.freq - a.freq
    return _cmp(a.word, b.word)


def read_words(stream: TextIO) -> Iterator[str]:
    """Yield the whitespace-separated words of ``stream`` in order."""
    for line in stream:
        yield from _WORD_RE.findall(line)