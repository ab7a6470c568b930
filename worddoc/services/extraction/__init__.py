"""Word 97-2003 binary document decoding."""

from worddoc.services.extraction.assembler import assemble_document, decode_document
from worddoc.services.extraction.bookmarks import extract_bookmarks
from worddoc.services.extraction.header import read_header
from worddoc.services.extraction.models import (
    BookmarkRange,
    Boundaries,
    Document,
    FileHeader,
    Piece,
)
from worddoc.services.extraction.pieces import build_pieces
from worddoc.services.extraction.service import WordExtractor, extract

__all__ = [
    "BookmarkRange",
    "Boundaries",
    "Document",
    "FileHeader",
    "Piece",
    "WordExtractor",
    "assemble_document",
    "build_pieces",
    "decode_document",
    "extract",
    "extract_bookmarks",
    "read_header",
]
