"""Tests for the string primitives."""
import pytest

from textcorpus.clean import (
    clean_whitespace,
    compile_word_pattern,
    remove_digits,
    remove_interpunctuation,
    remove_invalid_characters,
    remove_newlines,
    remove_word,
    trim,
    truncate,
)


def test_clean_whitespace():
    assert clean_whitespace("  a \t b\n\nc  ") == "a b c"
    assert clean_whitespace("") == ""


def test_trim_keeps_inner_whitespace():
    assert trim("  a   b  ") == "a   b"


def test_remove_interpunctuation():
    assert remove_interpunctuation("Hi! How? a.b,c;d-e") == "Hi  How  a b c d e"


def test_remove_newlines():
    assert remove_newlines("line1\r\nline2\rline3\n") == "line1 line2 line3 "


def test_remove_digits():
    assert remove_digits("abc123def456") == "abcdef"


def test_remove_invalid_characters():
    assert remove_invalid_characters("ab\ufffdc\ufffd") == "abc"


def test_remove_word_whole_words_only():
    assert remove_word("cat concat cat.", "cat") == " concat ."


def test_remove_word_case():
    assert remove_word("Cat cat", "cat") == "Cat "
    assert remove_word("Cat cat", "cat", case_insensitive=True) == " "


def test_remove_word_literal_metacharacters():
    assert remove_word("I like c++ a lot", "c++") == "I like  a lot"
    assert remove_word("exg and e.g. here", "e.g.") == "exg and  here"


def test_remove_empty_word_is_noop():
    assert remove_word("text", "") == "text"


def test_compile_word_pattern_flags():
    assert compile_word_pattern("x").search("X") is None
    assert compile_word_pattern("x", True).search("X") is not None


@pytest.mark.parametrize("n", [1, 5, 10])
def test_truncate(n):
    text = "abcdefghijklmnop"
    out = truncate(text, n)
    assert out == text[:n] + "..."


def test_truncate_short_text_untouched():
    assert truncate("short", 500) == "short"
    assert truncate("exact", 5) == "exact"
