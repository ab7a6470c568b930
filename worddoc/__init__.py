"""Text and bookmark extraction for legacy binary Word documents."""

from worddoc.container import Container, OleContainer
from worddoc.enums import DocumentSection, TableStream
from worddoc.exceptions import ContainerError, FormatError, StreamError, WordExtractionError
from worddoc.services.extraction import (
    BookmarkRange,
    Boundaries,
    Document,
    Piece,
    WordExtractor,
    decode_document,
    extract,
)

__all__ = [
    "BookmarkRange",
    "Boundaries",
    "Container",
    "ContainerError",
    "Document",
    "DocumentSection",
    "FormatError",
    "OleContainer",
    "Piece",
    "StreamError",
    "TableStream",
    "WordExtractionError",
    "WordExtractor",
    "decode_document",
    "extract",
]
