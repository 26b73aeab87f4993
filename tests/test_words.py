import io

import pytest

from wordadt.words import Word, compare_by_freq, compare_by_word, read_words


def test_new_word_starts_at_one():
    assert Word("apple").freq == 1


def test_increase_adds_one():
    w = Word("apple", 4)
    before = w.freq
    w.increase()
    w.increase()
    assert w.freq == before + 2


def test_format_uses_tab():
    assert Word("apple", 3).format() == "apple\t3"


def test_compare_by_word_orders_text():
    assert compare_by_word(Word("apple"), Word("banana")) < 0
    assert compare_by_word(Word("banana"), Word("apple")) > 0
    assert compare_by_word(Word("apple", 1), Word("apple", 9)) == 0


def test_compare_by_word_is_case_sensitive_bytewise():
    # Upper case sorts before lower case, as with strcmp.
    assert compare_by_word(Word("Zebra"), Word("apple")) < 0


@pytest.mark.parametrize(
    "a, b",
    [(Word("x", 5), Word("a", 2)), (Word("a", 3), Word("b", 3))],
)
def test_compare_by_freq_first_sorts_first(a, b):
    assert compare_by_freq(a, b) < 0
    assert compare_by_freq(b, a) > 0


def test_compare_by_freq_equal():
    assert compare_by_freq(Word("same", 2), Word("same", 2)) == 0


def test_read_words_splits_on_whitespace():
    text = "the cat\tsat\n\n  on\r\nthe mat\n"
    assert list(read_words(io.StringIO(text))) == ["the", "cat", "sat", "on", "the", "mat"]


def test_read_words_keeps_punctuation():
    assert list(read_words(io.StringIO("hello, world!"))) == ["hello,", "world!"]


def test_read_words_empty_stream():
    assert list(read_words(io.StringIO("   \n\t\n"))) == []