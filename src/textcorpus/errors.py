from __future__ import annotations


class CorpusError(Exception):
    """Base class for corpus errors."""


class InvalidArgument(CorpusError, TypeError):
    """A value of the wrong shape or type was passed in."""


class LengthMismatch(CorpusError, ValueError):
    """An attribute sequence does not line up with the documents."""
