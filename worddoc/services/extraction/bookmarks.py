"""Bookmark table decoding (SttbfBkmk names with PlcfBkf/PlcfBkl positions)."""

import logging

from worddoc.exceptions import FormatError
from worddoc.services.extraction.binary import read_bytes, read_u16, read_u32
from worddoc.services.extraction.fib import (
    CP_SIZE,
    EXTENDED_STRING_MARKER,
    STTB_HEADER_SIZE,
    FibOffset,
)
from worddoc.services.extraction.models import BookmarkRange
from worddoc.services.extraction.text import decode_utf16

logger = logging.getLogger(__name__)


def extract_bookmarks(main_buffer: bytes, table_buffer: bytes) -> dict[str, BookmarkRange]:
    """
    Build the bookmark name to character range mapping.

    Each name in the string table pairs with the entry at the same index in the
    start and end position arrays.

    Raises:
        FormatError: on a single-byte name table or any out-of-range read
    """
    fc_names = read_u32(main_buffer, FibOffset.FC_STTBF_BKMK, "fcSttbfBkmk")
    lcb_names = read_u32(main_buffer, FibOffset.LCB_STTBF_BKMK, "lcbSttbfBkmk")
    fc_starts = read_u32(main_buffer, FibOffset.FC_PLCF_BKF, "fcPlcfBkf")
    lcb_starts = read_u32(main_buffer, FibOffset.LCB_PLCF_BKF, "lcbPlcfBkf")
    fc_ends = read_u32(main_buffer, FibOffset.FC_PLCF_BKL, "fcPlcfBkl")
    lcb_ends = read_u32(main_buffer, FibOffset.LCB_PLCF_BKL, "lcbPlcfBkl")

    if lcb_names == 0:
        return {}

    names = read_bytes(table_buffer, fc_names, lcb_names, "bookmark name table")
    starts = read_bytes(table_buffer, fc_starts, lcb_starts, "bookmark start positions")
    ends = read_bytes(table_buffer, fc_ends, lcb_ends, "bookmark end positions")

    if read_u16(names, 0, "bookmark table marker") != EXTENDED_STRING_MARKER:
        raise FormatError("Unsupported single-byte bookmark name table")

    bookmarks: dict[str, BookmarkRange] = {}
    offset = STTB_HEADER_SIZE
    index = 0

    while offset < lcb_names:
        byte_length = read_u16(names, offset, "bookmark name length") * 2
        name = decode_utf16(read_bytes(names, offset + 2, byte_length, "bookmark name"))
        bookmarks[name] = BookmarkRange(
            start=read_u32(starts, index * CP_SIZE, "bookmark start CP"),
            end=read_u32(ends, index * CP_SIZE, "bookmark end CP"),
        )
        offset += 2 + byte_length
        index += 1

    logger.debug(f"Decoded {len(bookmarks)} bookmarks")
    return bookmarks
