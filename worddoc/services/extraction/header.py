"""FIB header reader."""

from worddoc.exceptions import FormatError
from worddoc.services.extraction.binary import read_u16, read_u32
from worddoc.services.extraction.fib import WORD_MAGIC, FibOffset
from worddoc.services.extraction.models import Boundaries, FileHeader


def read_header(buffer: bytes) -> FileHeader:
    """
    Parse the fixed-offset FIB fields of a WordDocument stream.

    Args:
        buffer: Full WordDocument stream contents

    Returns:
        FileHeader with magic, flags and text boundaries

    Raises:
        FormatError: on an invalid magic number or a truncated header
    """
    magic = read_u16(buffer, FibOffset.MAGIC, "magic number")
    if magic != WORD_MAGIC:
        raise FormatError(
            f"This does not seem to be a Word document: Invalid magic number: {magic:x}"
        )

    flags = read_u16(buffer, FibOffset.FLAGS, "FIB flags")
    boundaries = Boundaries(
        fc_min=read_u32(buffer, FibOffset.FC_MIN, "fcMin"),
        ccp_text=read_u32(buffer, FibOffset.CCP_TEXT, "ccpText"),
        ccp_ftn=read_u32(buffer, FibOffset.CCP_FTN, "ccpFtn"),
        ccp_hdd=read_u32(buffer, FibOffset.CCP_HDD, "ccpHdd"),
        ccp_atn=read_u32(buffer, FibOffset.CCP_ATN, "ccpAtn"),
    )
    return FileHeader(magic=magic, flags=flags, boundaries=boundaries)
