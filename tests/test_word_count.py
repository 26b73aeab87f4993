import io
from collections import Counter

import pytest

from wordadt.word_count import WordDictionary, binary_search, count_words, main
from wordadt.words import Word, compare_by_word

TEXT = "b a c a b a d\nc e\n"


def _cmp_int(a, b):
    return (a > b) - (a < b)


def test_binary_search_empty():
    assert binary_search([], 5, _cmp_int) == (0, False)


@pytest.mark.parametrize("key", [1, 3, 5, 7, 9])
def test_binary_search_finds_present(key):
    items = [1, 3, 5, 7, 9]
    index, found = binary_search(items, key, _cmp_int)
    assert found
    assert items[index] == key


@pytest.mark.parametrize("key", [0, 2, 4, 8, 10])
def test_binary_search_insertion_point_keeps_order(key):
    items = [1, 3, 5, 7, 9]
    index, found = binary_search(items, key, _cmp_int)
    assert not found
    items.insert(index, key)
    assert items == sorted(items)


def test_binary_search_with_words():
    items = [Word("ant"), Word("bee"), Word("cat")]
    index, found = binary_search(items, Word("bee", 0), compare_by_word)
    assert found and items[index].word == "bee"


def test_dictionary_add_counts_and_sorts():
    dic = WordDictionary()
    tokens = TEXT.split()
    for token in tokens:
        dic.add(token)
    assert [w.word for w in dic] == sorted(set(tokens))
    assert len(dic) == len(set(tokens))
    assert {w.word: w.freq for w in dic} == dict(Counter(tokens))


def test_add_returns_entry():
    dic = WordDictionary()
    first = dic.add("x")
    second = dic.add("x")
    assert first is second
    assert second.freq == 2


def test_by_frequency_order():
    dic = count_words(io.StringIO(TEXT))
    ranked = dic.by_frequency()
    assert len(ranked) == len(dic)
    for a, b in zip(ranked, ranked[1:]):
        assert a.freq > b.freq or (a.freq == b.freq and a.word < b.word)
    assert ranked[0].word == "a"


def test_by_frequency_leaves_word_order():
    dic = count_words(io.StringIO(TEXT))
    dic.by_frequency()
    words = [w.word for w in dic]
    assert words == sorted(words)


def test_main_by_word(tmp_path, capsys):
    path = tmp_path / "in.txt"
    path.write_text(TEXT)
    assert main(["-w", str(path)]) == 0
    out = capsys.readouterr().out
    counts = Counter(TEXT.split())
    expected = "".join(f"{w}\t{counts[w]}\n" for w in sorted(counts))
    assert out == expected


def test_main_by_freq(tmp_path, capsys):
    path = tmp_path / "in.txt"
    path.write_text(TEXT)
    assert main(["-f", str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    pairs = [(line.split("\t")[0], int(line.split("\t")[1])) for line in lines]
    assert dict(pairs) == dict(Counter(TEXT.split()))
    assert pairs == sorted(pairs, key=lambda p: (-p[1], p[0]))


def test_main_wrong_arg_count(capsys):
    assert main(["-w"]) == 1
    assert "Usage:" in capsys.readouterr().err


def test_main_unknown_option(tmp_path, capsys):
    path = tmp_path / "in.txt"
    path.write_text(TEXT)
    assert main(["-x", str(path)]) == 1
    assert capsys.readouterr().err == "unknown option : -x\n"


def test_main_missing_file(tmp_path, capsys):
    missing = tmp_path / "nope.txt"
    assert main(["-w", str(missing)]) == 1
    assert capsys.readouterr().err == f"cannot open file : {missing}\n"