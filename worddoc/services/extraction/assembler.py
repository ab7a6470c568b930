"""Assemble a Document from fully materialized stream buffers."""

from worddoc.services.extraction.bookmarks import extract_bookmarks
from worddoc.services.extraction.header import read_header
from worddoc.services.extraction.models import Document, FileHeader
from worddoc.services.extraction.pieces import build_pieces


def assemble_document(header: FileHeader, main_buffer: bytes, table_buffer: bytes) -> Document:
    """Decode bookmarks and pieces and combine them with the header boundaries."""
    bookmarks = extract_bookmarks(main_buffer, table_buffer)
    pieces = build_pieces(main_buffer, table_buffer)
    return Document(
        boundaries=header.boundaries,
        pieces=tuple(pieces),
        bookmarks=bookmarks,
    )


def decode_document(main_buffer: bytes, table_buffer: bytes) -> Document:
    """Decode a document from its WordDocument and table stream contents."""
    return assemble_document(read_header(main_buffer), main_buffer, table_buffer)
