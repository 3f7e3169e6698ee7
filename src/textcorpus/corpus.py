"""Ordered document collection with chainable bulk transformations."""
from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Callable, Iterator

from . import clean as _clean
from .document import Document, DocumentLike, as_document, is_document
from .errors import InvalidArgument, LengthMismatch
from .stem import stem_text

LOGGER = logging.getLogger(__name__)

# (text, attributes, index) -> new text
TextFn = Callable[[str, Mapping[str, Any], int], str]
# (text, attributes, index) -> keep?
Predicate = Callable[[str, Mapping[str, Any], int], Any]

SEPARATOR = "─ " * 16


def _is_sequence(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _is_string_sequence(value: object) -> bool:
    return _is_sequence(value) and all(isinstance(v, str) for v in value)


def _is_document_sequence(value: object) -> bool:
    return _is_sequence(value) and all(is_document(v) for v in value)


def _checked_text(value: object, index: int) -> str:
    if not isinstance(value, str):
        raise InvalidArgument(
            f"Transformation has to return a string, got {type(value).__name__} for document {index}"
        )
    return value


class Corpus:
    """A mutable, ordered collection of documents.

    Mutators change the corpus in place and return it, so calls chain::

        Corpus(["Foo  BAR", "baz 42"]).to_lower().remove_digits().clean()

    ``map`` and ``filter`` leave the receiver alone and return a new corpus.
    """

    def __init__(self, docs: str | Sequence[str] | None = None):
        self.documents: list[DocumentLike] = []
        if docs is None:
            return
        if isinstance(docs, str):
            self.documents.append(Document(docs))
        elif _is_string_sequence(docs):
            self.documents.extend(Document(d) for d in docs)
        else:
            raise InvalidArgument("Constructor expects a string or a sequence of strings.")

    @property
    def n_docs(self) -> int:
        return len(self.documents)

    def __len__(self) -> int:
        return len(self.documents)

    def __iter__(self) -> Iterator[DocumentLike]:
        return iter(self.documents)

    def __getitem__(self, index: int) -> DocumentLike:
        return self.documents[index]

    def __repr__(self) -> str:
        return f"Corpus(n_docs={self.n_docs})"

    def __str__(self) -> str:
        return self.to_string()

    def texts(self) -> list[str]:
        return [d.text for d in self.documents]

    # --- building ---

    def add_doc(self, doc: str | DocumentLike) -> Corpus:
        """Append a raw string (wrapped in a Document) or a document."""
        self.documents.append(as_document(doc))
        return self

    def add_docs(self, docs: Sequence[str] | Sequence[DocumentLike]) -> Corpus:
        """Append all strings, or all documents. Mixed input is rejected."""
        if _is_string_sequence(docs):
            self.documents.extend(Document(d) for d in docs)
        elif _is_document_sequence(docs):
            self.documents.extend(docs)
        else:
            raise InvalidArgument("Parameter expects a sequence of strings or documents.")
        return self

    def set_attributes(self, arr: Sequence[Mapping[str, Any]]) -> Corpus:
        """Replace each document's attributes positionally.

        Nothing is written unless ``arr`` holds exactly one mapping per document.
        """
        if not _is_sequence(arr) or not all(isinstance(a, Mapping) for a in arr):
            raise InvalidArgument("Input argument has to be a sequence of mappings.")
        if len(arr) != self.n_docs:
            raise LengthMismatch(
                f"Got {len(arr)} attribute mappings for {self.n_docs} documents; the counts have to match."
            )
        for doc, attributes in zip(self.documents, arr):
            doc.attributes = attributes
        return self

    # --- higher-order operations ---

    def apply(self, fn: TextFn) -> Corpus:
        """Overwrite every document's text with ``fn(text, attributes, index)``.

        Not transactional: if ``fn`` raises at index i, documents before i
        keep their new text.
        """
        for i, doc in enumerate(self.documents):
            doc.text = _checked_text(fn(doc.text, doc.attributes, i), i)
        return self

    def map(self, fn: TextFn) -> Corpus:
        """Return a new corpus of fresh documents holding ``fn``'s output.

        The receiver is not modified. Each new document shares its source
        document's attributes mapping by reference.
        """
        ret = Corpus()
        for i, doc in enumerate(self.documents):
            text = _checked_text(fn(doc.text, doc.attributes, i), i)
            ret.documents.append(Document(text, doc.attributes))
        return ret

    def filter(self, fn: Predicate) -> Corpus:
        """Return a new corpus with the documents for which ``fn`` is truthy.

        Kept documents are the same objects as in the receiver.
        """
        ret = Corpus()
        for i, doc in enumerate(self.documents):
            if fn(doc.text, doc.attributes, i):
                ret.documents.append(doc)
        LOGGER.debug("filter kept %d of %d documents", ret.n_docs, self.n_docs)
        return ret

    def _apply_str(self, fn: Callable[[str], str]) -> Corpus:
        LOGGER.debug("Applying %s to %d documents", fn.__name__, self.n_docs)
        return self.apply(lambda text, attributes, i: fn(text))

    # --- built-in normalization ---

    def clean(self) -> Corpus:
        return self._apply_str(_clean.clean_whitespace)

    def trim(self) -> Corpus:
        return self._apply_str(_clean.trim)

    def to_lower(self) -> Corpus:
        return self._apply_str(str.lower)

    def to_upper(self) -> Corpus:
        return self._apply_str(str.upper)

    def stem(self, algorithm: str | None = None) -> Corpus:
        """Stem with ``"porter"`` (default) or ``"lancaster"``."""
        LOGGER.debug("Stemming %d documents (%s)", self.n_docs, algorithm or "default")
        return self.apply(lambda text, attributes, i: stem_text(text, algorithm))

    def remove_words(self, words: Sequence[str], case_insensitive: bool = False) -> Corpus:
        """Delete whole-word occurrences of each word, then clean whitespace.

        Words are matched literally; regex metacharacters carry no meaning.
        """
        if not _is_string_sequence(words):
            raise InvalidArgument("words has to be a sequence of strings.")
        patterns = [_clean.compile_word_pattern(w, bool(case_insensitive)) for w in words if w]

        def _remove(text: str, attributes: Mapping[str, Any], i: int) -> str:
            for pattern in patterns:
                text = pattern.sub("", text)
            return text

        LOGGER.debug("Removing %d words from %d documents", len(patterns), self.n_docs)
        self.apply(_remove)
        return self.clean()

    def remove_interpunctuation(self) -> Corpus:
        return self._apply_str(_clean.remove_interpunctuation)

    def remove_newlines(self) -> Corpus:
        return self._apply_str(_clean.remove_newlines)

    def remove_digits(self) -> Corpus:
        return self._apply_str(_clean.remove_digits)

    def remove_invalid_characters(self) -> Corpus:
        return self._apply_str(_clean.remove_invalid_characters)

    # --- diagnostics ---

    def to_string(self, nchars: int = 500) -> str:
        """Readable dump of every document, truncated to ``nchars`` characters."""
        parts: list[str] = []
        for i, doc in enumerate(self.documents):
            parts.append(f"Document {i}:\n\t{_clean.truncate(doc.text, nchars)}\n{SEPARATOR}\n")
        return "".join(parts)
