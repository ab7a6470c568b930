"""Bounds-checked little-endian reads over in-memory stream buffers."""

import struct

from worddoc.exceptions import FormatError

_U8 = struct.Struct("<B")
_U16 = struct.Struct("<H")
_U32 = struct.Struct("<I")


def _unpack(fmt: struct.Struct, buffer: bytes, offset: int, what: str) -> int:
    if offset < 0:
        raise FormatError(f"Negative offset {offset} reading {what}")
    try:
        return fmt.unpack_from(buffer, offset)[0]
    except struct.error as e:
        raise FormatError(
            f"Read past end of buffer at offset {offset:#x} reading {what} "
            f"(buffer is {len(buffer)} bytes)"
        ) from e


def read_u8(buffer: bytes, offset: int, what: str = "byte") -> int:
    return _unpack(_U8, buffer, offset, what)


def read_u16(buffer: bytes, offset: int, what: str = "u16") -> int:
    return _unpack(_U16, buffer, offset, what)


def read_u32(buffer: bytes, offset: int, what: str = "u32") -> int:
    return _unpack(_U32, buffer, offset, what)


def read_bytes(buffer: bytes, offset: int, length: int, what: str = "bytes") -> bytes:
    """Return exactly ``length`` bytes starting at ``offset``.

    Raises:
        FormatError: if the range does not lie entirely within the buffer
    """
    if offset < 0 or length < 0 or offset + length > len(buffer):
        raise FormatError(
            f"Range {offset:#x}+{length} out of bounds reading {what} "
            f"(buffer is {len(buffer)} bytes)"
        )
    return bytes(buffer[offset : offset + length])
