"""Stateless string transformations used by the corpus operations."""
from __future__ import annotations

import re


_re_whitespace = re.compile(r"\s+")
_re_interpunctuation = re.compile(r"[!?.,;-]")
_re_newline = re.compile(r"\r?\n|\r")
_re_digit = re.compile(r"\d")

REPLACEMENT_CHARACTER = "\ufffd"
TRUNCATION_MARKER = "..."


def clean_whitespace(text: str) -> str:
    """Collapse whitespace runs to a single space and trim both ends."""
    return _re_whitespace.sub(" ", text).strip()


def trim(text: str) -> str:
    return text.strip()


def remove_interpunctuation(text: str) -> str:
    """Replace each of ``! ? . , ; -`` with a space."""
    return _re_interpunctuation.sub(" ", text)


def remove_newlines(text: str) -> str:
    # "\r\n" counts as one newline
    return _re_newline.sub(" ", text)


def remove_digits(text: str) -> str:
    return _re_digit.sub("", text)


def remove_invalid_characters(text: str) -> str:
    """Drop U+FFFD, left behind by decoding malformed bytes."""
    return text.replace(REPLACEMENT_CHARACTER, "")


def compile_word_pattern(word: str, case_insensitive: bool = False) -> re.Pattern[str]:
    """Pattern matching ``word`` literally, as a whole word.

    Lookarounds stand in for ``\\b`` so words that start or end with
    punctuation ("c++", "e.g.") still match where they stand alone.
    """
    flags = re.IGNORECASE if case_insensitive else 0
    return re.compile(r"(?<!\w)" + re.escape(word) + r"(?!\w)", flags)


def remove_word(text: str, word: str, case_insensitive: bool = False) -> str:
    if not word:
        return text
    return compile_word_pattern(word, case_insensitive).sub("", text)


def truncate(text: str, nchars: int = 500) -> str:
    """Keep the first ``nchars`` characters, marking the cut."""
    if len(text) <= nchars:
        return text
    return text[:nchars] + TRUNCATION_MARKER
