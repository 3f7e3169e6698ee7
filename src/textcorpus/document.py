from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from .errors import InvalidArgument


@dataclass
class Document:
    text: str
    attributes: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise InvalidArgument(f"Document text has to be a string, got {type(self.text).__name__}")
        if not isinstance(self.attributes, Mapping):
            raise InvalidArgument(
                f"Document attributes have to be a mapping, got {type(self.attributes).__name__}"
            )


@runtime_checkable
class DocumentLike(Protocol):
    text: str
    attributes: Mapping[str, Any]


def is_document(value: object) -> bool:
    """True for Document instances and objects with a str `text` and a mapping `attributes`."""
    if isinstance(value, Document):
        return True
    if not isinstance(value, DocumentLike):
        return False
    return isinstance(value.text, str) and isinstance(value.attributes, Mapping)


def as_document(value: str | DocumentLike) -> DocumentLike:
    """Wrap raw strings; pass document-shaped values through untouched."""
    if isinstance(value, str):
        return Document(value)
    if is_document(value):
        return value
    raise InvalidArgument("Argument has to be a string or document.")
