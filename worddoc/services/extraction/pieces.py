"""Piece table decoding.

The table stream holds a CLX at the offset named by the FIB's fcClx field: zero
or more property runs (marker 1) followed by the piece table (marker 2). The
piece table is a PLC of ``count + 1`` character positions followed by ``count``
8-byte piece descriptors.
"""

import logging

from worddoc.exceptions import FormatError
from worddoc.services.extraction.binary import read_bytes, read_u8, read_u16, read_u32
from worddoc.services.extraction.fib import (
    CLX_PIECE_TABLE,
    CLX_PROPERTY_RUN,
    CP_SIZE,
    FC_COMPRESSED,
    PIECE_DESCRIPTOR_FC_OFFSET,
    PIECE_DESCRIPTOR_SIZE,
    PIECE_ENTRY_SIZE,
    FibOffset,
)
from worddoc.services.extraction.models import Piece
from worddoc.services.extraction.text import decode_double_byte, decode_single_byte

logger = logging.getLogger(__name__)


def _locate_piece_table(table_buffer: bytes, pos: int) -> int:
    """Skip property runs and return the offset just past the piece table marker."""
    while read_u8(table_buffer, pos, "CLX marker") == CLX_PROPERTY_RUN:
        pos += 1
        skip = read_u16(table_buffer, pos, "property run length")
        pos += 2 + skip

    marker = read_u8(table_buffer, pos, "CLX marker")
    if marker != CLX_PIECE_TABLE:
        raise FormatError(f"Corrupted Word document: unexpected CLX marker {marker:#x}")
    return pos + 1


def build_pieces(main_buffer: bytes, table_buffer: bytes) -> list[Piece]:
    """
    Reconstruct the ordered text pieces of a document.

    Args:
        main_buffer: WordDocument stream contents
        table_buffer: Table stream contents

    Returns:
        Pieces in traversal order with decoded text and character positions

    Raises:
        FormatError: on a corrupted CLX or any out-of-range read
    """
    clx_offset = read_u32(main_buffer, FibOffset.FC_CLX, "fcClx")
    pos = _locate_piece_table(table_buffer, clx_offset)

    table_size = read_u32(table_buffer, pos, "piece table size")
    pos += 4

    if table_size < CP_SIZE or (table_size - CP_SIZE) % PIECE_ENTRY_SIZE:
        raise FormatError(f"Corrupted Word document: invalid piece table size {table_size}")
    count = (table_size - CP_SIZE) // PIECE_ENTRY_SIZE
    descriptors = pos + (count + 1) * CP_SIZE

    pieces: list[Piece] = []
    start = 0
    last_position = 0

    for x in range(count):
        file_pos = read_u32(
            table_buffer,
            descriptors + x * PIECE_DESCRIPTOR_SIZE + PIECE_DESCRIPTOR_FC_OFFSET,
            "piece descriptor fc",
        )
        unicode = (file_pos & FC_COMPRESSED) == 0
        if not unicode:
            file_pos = (file_pos & ~FC_COMPRESSED) // 2

        cp_start = read_u32(table_buffer, pos + x * CP_SIZE, "piece start CP")
        cp_end = read_u32(table_buffer, pos + (x + 1) * CP_SIZE, "piece end CP")
        tot_length = cp_end - cp_start
        if tot_length < 0:
            raise FormatError(f"Corrupted Word document: piece {x} ends before it starts")

        if unicode:
            raw = read_bytes(main_buffer, file_pos, 2 * tot_length, f"piece {x} text")
            text = decode_double_byte(raw)
        else:
            raw = read_bytes(main_buffer, file_pos, tot_length, f"piece {x} text")
            text = decode_single_byte(raw)

        pieces.append(
            Piece(
                start=start,
                tot_length=tot_length,
                file_pos=file_pos,
                unicode=unicode,
                text=text,
                length=len(text),
                position=last_position,
                end_position=last_position + len(text),
            )
        )

        start += tot_length // 2 if unicode else tot_length
        last_position += len(text)

    logger.debug(f"Decoded {len(pieces)} pieces ({last_position} characters)")
    return pieces
