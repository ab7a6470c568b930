"""Fixed offsets and markers of the Word 97-2003 binary format.

Offsets are relative to the start of the WordDocument stream unless noted.
"""

from enum import IntEnum

MAIN_STREAM = "WordDocument"

WORD_MAGIC = 0xA5EC

# FIB flag bits (the 16-bit field at FibOffset.FLAGS)
FLAG_ENCRYPTED = 0x0100
FLAG_WHICH_TABLE = 0x0200

# CLX markers in the table stream
CLX_PROPERTY_RUN = 1  # Prc: grpprl run preceding the piece table
CLX_PIECE_TABLE = 2  # Pcdt

# Piece descriptor fc bit marking single-byte (compressed) text
FC_COMPRESSED = 0x40000000

CP_SIZE = 4
PIECE_DESCRIPTOR_SIZE = 8
PIECE_ENTRY_SIZE = CP_SIZE + PIECE_DESCRIPTOR_SIZE
PIECE_DESCRIPTOR_FC_OFFSET = 2  # Leading flags word of each descriptor is skipped

# STTB header marker for double-byte strings
EXTENDED_STRING_MARKER = 0xFFFF
STTB_HEADER_SIZE = 6


class FibOffset(IntEnum):
    """Byte offsets of the FIB fields read by the decoder."""

    MAGIC = 0x0000
    FLAGS = 0x000A
    FC_MIN = 0x0018
    CCP_TEXT = 0x004C
    CCP_FTN = 0x0050
    CCP_HDD = 0x0054
    CCP_ATN = 0x005C
    FC_STTBF_BKMK = 0x0142
    LCB_STTBF_BKMK = 0x0146
    FC_PLCF_BKF = 0x014A
    LCB_PLCF_BKF = 0x014E
    FC_PLCF_BKL = 0x0152
    LCB_PLCF_BKL = 0x0156
    FC_CLX = 0x01A2
