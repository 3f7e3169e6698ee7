"""Text document collections with chainable cleaning operations.

Callers load raw strings into a ``Corpus``, attach per-document attributes,
and run normalization steps (case folding, whitespace and punctuation
cleanup, stop word removal, stemming) before handing the texts to whatever
analysis comes next.
"""
from .corpus import Corpus
from .document import Document, DocumentLike, as_document, is_document
from .errors import CorpusError, InvalidArgument, LengthMismatch
from .profiles import CleaningProfile, apply_profile, load_profile, profile_from_cfg

__all__ = [
    "Corpus",
    "Document",
    "DocumentLike",
    "as_document",
    "is_document",
    "CorpusError",
    "InvalidArgument",
    "LengthMismatch",
    "CleaningProfile",
    "apply_profile",
    "load_profile",
    "profile_from_cfg",
]
