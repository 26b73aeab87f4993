"""Demonstrations of the max-heap with random integers and with words from a file."""

from __future__ import annotations

import random
import sys
from collections.abc import Iterator, Sequence
from typing import Optional, TextIO

from wordadt.heap import Heap
from wordadt.words import Word, compare_by_word, read_words

MAX_ELEM = 20
MAX_DELETE = 100


def compare_ints(a: int, b: int) -> int:
    """Three-way comparison of integers."""
    return a - b


def read_word_freqs(stream: TextIO) -> Iterator[tuple[str, int]]:
    """Yield ``(word, freq)`` pairs from alternating word and number tokens."""
    tokens = read_words(stream)
    for word in tokens:
        freq = next(tokens, None)
        if freq is None:
            raise ValueError(f"missing frequency for {word!r}")
        try:
            yield word, int(freq)
        except ValueError:
            raise ValueError(f"bad frequency for {word!r}: {freq!r}") from None


def int_heap_demo(count: int, rng: random.Random, out: TextIO) -> list[int]:
    """Push ``count`` random numbers, print the heap, then pop them all."""
    heap: Heap[int] = Heap(compare_ints)
    out.write("Insert:")
    for _ in range(count):
        value = rng.randint(1, count * 3)
        out.write(f"{value:4d}")
        heap.push(value)
    out.write("\n")

    out.write("Heap:  ")
    out.write("".join(f"{value:4d}" for value in heap) + "\n")

    out.write("Delete:")
    popped = []
    while not heap.is_empty():
        value = heap.pop()
        out.write(f"{value:4d}")
        popped.append(value)
    out.write("\n")
    return popped


def word_heap_demo(stream: TextIO, out: TextIO) -> list[Word]:
    """Push words read from ``stream``, print the heap, then pop up to 100 of them."""
    heap: Heap[Word] = Heap(compare_by_word)
    out.write("Insert:")
    for word, freq in read_word_freqs(stream):
        out.write(f" {word}")
        heap.push(Word(word, freq))
    out.write("\n")

    out.write("Heap:  ")
    out.write("".join(f"{item.word}\n" for item in heap) + "\n")

    out.write("Delete: ")
    popped = []
    while len(popped) < MAX_DELETE and not heap.is_empty():
        item = heap.pop()
        out.write(item.format() + "\n")
        popped.append(item)
    out.write("\n")
    return popped


def int_main(argv: Optional[Sequence[str]] = None) -> int:
    int_heap_demo(MAX_ELEM, random.Random(), sys.stdout)
    return 0


def word_main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        sys.stderr.write("usage: word_heap FILE\n")
        return 1
    path = args[0]
    try:
        stream = open(path, encoding="utf-8", errors="replace")
    except OSError:
        sys.stderr.write(f"file open error: {path}\n")
        return 2
    with stream:
        word_heap_demo(stream, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(int_main())