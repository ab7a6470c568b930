"""Shared fixtures: synthetic Word stream buffers and an in-memory container."""

import io
import struct
from dataclasses import dataclass, field

import pytest

from worddoc.exceptions import StreamError
from worddoc.services.extraction.fib import (
    CLX_PIECE_TABLE,
    CLX_PROPERTY_RUN,
    EXTENDED_STRING_MARKER,
    FC_COMPRESSED,
    WORD_MAGIC,
    FibOffset,
)


@dataclass
class DocBuilder:
    """Builds WordDocument and table stream buffers byte by byte."""

    magic: int = WORD_MAGIC
    flags: int = 0
    fc_min: int = 0x400
    ccp_text: int | None = None  # Defaults to the total piece length
    ccp_ftn: int = 0
    ccp_hdd: int = 0
    ccp_atn: int = 0
    main_size: int = 0x1000
    clx_marker: int = CLX_PIECE_TABLE
    bookmark_marker: int = EXTENDED_STRING_MARKER
    property_runs: list[bytes] = field(default_factory=list)
    pieces: list[tuple[int, int]] = field(default_factory=list)  # (cp length, raw fc)
    bookmarks: list[tuple[str, int, int]] = field(default_factory=list)
    texts: list[tuple[int, bytes]] = field(default_factory=list)

    def add_text(self, offset: int, text: str, unicode: bool = False) -> "DocBuilder":
        """Place text in the main stream and describe it with a piece."""
        if unicode:
            encoded = text.encode("utf-16-le")
            self.texts.append((offset, encoded))
            self.pieces.append((len(encoded) // 2, offset))  # CPs count UTF-16 code units
        else:
            self.texts.append((offset, text.encode("latin-1")))
            self.pieces.append((len(text), (offset * 2) | FC_COMPRESSED))
        return self

    def add_bookmark(self, name: str, start: int, end: int) -> "DocBuilder":
        self.bookmarks.append((name, start, end))
        return self

    def _build_table(self) -> tuple[bytes, int, list[int]]:
        table = bytearray(16)
        clx_offset = len(table)

        for run in self.property_runs:
            table += bytes([CLX_PROPERTY_RUN]) + struct.pack("<H", len(run)) + run

        table += bytes([self.clx_marker])
        count = len(self.pieces)
        table += struct.pack("<I", 4 + 12 * count)
        cp = 0
        table += struct.pack("<I", cp)
        for length, _ in self.pieces:
            cp += length
            table += struct.pack("<I", cp)
        for _, fc in self.pieces:
            table += struct.pack("<HIH", 0, fc, 0)

        fields = [0] * 6
        if self.bookmarks:
            names = struct.pack("<HHH", self.bookmark_marker, len(self.bookmarks), 0)
            for name, _, _ in self.bookmarks:
                encoded = name.encode("utf-16-le")
                names += struct.pack("<H", len(encoded) // 2) + encoded
            n = len(self.bookmarks)
            starts = struct.pack(f"<{n + 1}I", *[b[1] for b in self.bookmarks], 0)
            starts += bytes(4 * n)  # BKF entries
            ends = struct.pack(f"<{n + 1}I", *[b[2] for b in self.bookmarks], 0)

            for i, region in enumerate((names, starts, ends)):
                fields[2 * i] = len(table)
                fields[2 * i + 1] = len(region)
                table += region

        return bytes(table), clx_offset, fields

    def build(self) -> tuple[bytes, bytes]:
        """Return (main stream, table stream) buffers."""
        table, clx_offset, bookmark_fields = self._build_table()

        main = bytearray(self.main_size)
        struct.pack_into("<H", main, FibOffset.MAGIC, self.magic)
        struct.pack_into("<H", main, FibOffset.FLAGS, self.flags)
        ccp_text = self.ccp_text
        if ccp_text is None:
            ccp_text = sum(length for length, _ in self.pieces)
        struct.pack_into("<I", main, FibOffset.FC_MIN, self.fc_min)
        struct.pack_into("<I", main, FibOffset.CCP_TEXT, ccp_text)
        struct.pack_into("<I", main, FibOffset.CCP_FTN, self.ccp_ftn)
        struct.pack_into("<I", main, FibOffset.CCP_HDD, self.ccp_hdd)
        struct.pack_into("<I", main, FibOffset.CCP_ATN, self.ccp_atn)
        struct.pack_into("<6I", main, FibOffset.FC_STTBF_BKMK, *bookmark_fields)
        struct.pack_into("<I", main, FibOffset.FC_CLX, clx_offset)

        for offset, data in self.texts:
            main[offset : offset + len(data)] = data

        return bytes(main), table


class FakeContainer:
    """In-memory container exposing a fixed set of named streams."""

    def __init__(self, streams: dict[str, bytes]):
        self.streams = streams
        self.opened: list[str] = []
        self.closed = False

    def stream(self, name: str) -> io.BytesIO:
        if name not in self.streams:
            raise StreamError(f"Stream {name!r} not found")
        self.opened.append(name)
        return io.BytesIO(self.streams[name])

    def read_all(self, source: io.BytesIO) -> bytes:
        return source.read()

    def close(self) -> None:
        self.closed = True


# Compound file (CFB version 3) layout values
SECTOR_SIZE = 512
MINI_STREAM_CUTOFF = 0x1000
FREESECT = 0xFFFFFFFF
ENDOFCHAIN = 0xFFFFFFFE
FATSECT = 0xFFFFFFFD
NOSTREAM = 0xFFFFFFFF


def _directory_entry(
    name: str,
    entry_type: int,
    start: int,
    size: int,
    child: int = NOSTREAM,
    right: int = NOSTREAM,
) -> bytes:
    encoded = (name + "\0").encode("utf-16-le")
    return (
        encoded.ljust(64, b"\0")
        + struct.pack("<HBB3I", len(encoded), entry_type, 1, NOSTREAM, right, child)
        + bytes(16 + 4 + 16)  # CLSID, state bits, timestamps
        + struct.pack("<IQ", start, size)
    )


def write_compound_file(path, streams: dict[str, bytes]) -> None:
    """Write a minimal compound file holding the given streams.

    Layout: sector 0 is the FAT, sector 1 the directory, then each stream in
    consecutive sectors. Streams are padded to the mini stream cutoff so they
    live in regular sectors and no mini FAT is needed. At most three streams.
    """
    fat = [FATSECT, ENDOFCHAIN]
    entries: list[bytes] = [b""]
    data = b""
    names = list(streams)

    for i, name in enumerate(names):
        content = streams[name].ljust(MINI_STREAM_CUTOFF, b"\0")
        count = -(-len(content) // SECTOR_SIZE)
        start = len(fat)
        fat.extend(range(start + 1, start + count))
        fat.append(ENDOFCHAIN)
        right = i + 2 if i + 1 < len(names) else NOSTREAM
        entries.append(_directory_entry(name, 2, start, len(content), right=right))
        data += content.ljust(count * SECTOR_SIZE, b"\0")

    entries[0] = _directory_entry("Root Entry", 5, ENDOFCHAIN, 0, child=1)
    entries += [_directory_entry("", 0, 0, 0)] * (4 - len(entries))
    fat += [FREESECT] * (SECTOR_SIZE // 4 - len(fat))

    header = (
        bytes.fromhex("D0CF11E0A1B11AE1")
        + bytes(16)
        + struct.pack("<5H", 0x003E, 0x0003, 0xFFFE, 9, 6)
        + bytes(6)
        + struct.pack("<9I", 0, 1, 1, 0, MINI_STREAM_CUTOFF, ENDOFCHAIN, 0, ENDOFCHAIN, 0)
        + struct.pack("<109I", 0, *[FREESECT] * 108)
    )
    path.write_bytes(header + struct.pack(f"<{len(fat)}I", *fat) + b"".join(entries) + data)


@pytest.fixture
def compound_file(tmp_path):
    """Factory writing a real OLE compound file to a temporary path."""

    def _write(streams: dict[str, bytes], name: str = "document.doc"):
        path = tmp_path / name
        write_compound_file(path, streams)
        return path

    return _write


@pytest.fixture
def doc_builder():
    """Factory for synthetic document buffers."""
    return DocBuilder


@pytest.fixture
def fake_container():
    """Factory for in-memory containers."""
    return FakeContainer
