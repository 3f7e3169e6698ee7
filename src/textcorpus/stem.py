from __future__ import annotations

import re
from typing import Callable, Protocol

from nltk.stem import LancasterStemmer, PorterStemmer

from .errors import InvalidArgument


DEFAULT_ALGORITHM = "porter"

_re_word = re.compile(r"\w+")


class Stemmer(Protocol):
    def stem(self, word: str) -> str: ...


_FACTORIES: dict[str, Callable[[], Stemmer]] = {
    "porter": PorterStemmer,
    "lancaster": LancasterStemmer,
}
_cache: dict[str, Stemmer] = {}


def available_algorithms() -> list[str]:
    return sorted(_FACTORIES)


def get_stemmer(algorithm: str | None = None) -> Stemmer:
    """Return the stemmer registered under ``algorithm`` (Porter when None)."""
    name = DEFAULT_ALGORITHM if algorithm is None else str(algorithm).strip().lower()
    if name not in _FACTORIES:
        raise InvalidArgument(
            f"Unknown stemming algorithm: {algorithm!r} (expected one of {available_algorithms()})"
        )
    if name not in _cache:
        _cache[name] = _FACTORIES[name]()
    return _cache[name]


def stem_text(text: str, algorithm: str | None = None) -> str:
    """Stem every word in ``text``, leaving whitespace and punctuation as is.

    Both nltk stemmers lowercase their output.
    """
    stemmer = get_stemmer(algorithm)
    return _re_word.sub(lambda m: stemmer.stem(m.group(0)), text)
