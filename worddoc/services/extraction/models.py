"""Data models for decoded Word documents."""

from collections.abc import Mapping
from dataclasses import asdict, dataclass, field
from types import MappingProxyType

from worddoc.config import settings
from worddoc.enums import DocumentSection, TableStream
from worddoc.services.extraction.fib import FLAG_ENCRYPTED, FLAG_WHICH_TABLE
from worddoc.services.extraction.text import filter_text as _filter_text, join_surrogates


@dataclass(frozen=True)
class Boundaries:
    """Text start offset and per-section character counts from the FIB."""

    fc_min: int
    ccp_text: int
    ccp_ftn: int
    ccp_hdd: int
    ccp_atn: int


@dataclass(frozen=True)
class FileHeader:
    """Scalar fields read from the start of the WordDocument stream."""

    magic: int
    flags: int
    boundaries: Boundaries

    @property
    def table_stream(self) -> TableStream:
        return TableStream.ONE if self.flags & FLAG_WHICH_TABLE else TableStream.ZERO

    @property
    def is_encrypted(self) -> bool:
        return bool(self.flags & FLAG_ENCRYPTED)


@dataclass(frozen=True)
class Piece:
    """A contiguous text fragment referenced by the piece table."""

    start: int
    tot_length: int
    file_pos: int
    unicode: bool
    text: str
    length: int
    position: int
    end_position: int


@dataclass(frozen=True)
class BookmarkRange:
    """Character-position span of a named bookmark."""

    start: int
    end: int


@dataclass(frozen=True)
class Document:
    """Result of decoding a Word document."""

    boundaries: Boundaries
    pieces: tuple[Piece, ...] = ()
    bookmarks: Mapping[str, BookmarkRange] = field(default_factory=dict)

    def __post_init__(self):
        # Read-only view over a private copy of the bookmark mapping
        object.__setattr__(self, "bookmarks", MappingProxyType(dict(self.bookmarks)))
        object.__setattr__(self, "pieces", tuple(self.pieces))

    @property
    def text(self) -> str:
        """Full logical text, all sections included."""
        return "".join(piece.text for piece in self.pieces)

    def get_text_range(self, start: int, end: int) -> str:
        """
        Return the text between two character positions.

        Args:
            start: First character position (inclusive)
            end: Last character position (exclusive)

        Returns:
            Text assembled from every piece overlapping the range
        """
        parts: list[str] = []
        for piece in self.pieces:
            if piece.end_position <= start or piece.position >= end:
                continue
            local_start = max(start, piece.position) - piece.position
            local_end = min(end, piece.end_position) - piece.position
            parts.append(piece.text[local_start:local_end])
        return "".join(parts)

    def _section_range(self, section: DocumentSection) -> tuple[int, int]:
        b = self.boundaries
        lengths = {
            DocumentSection.BODY: b.ccp_text,
            DocumentSection.FOOTNOTES: b.ccp_ftn,
            DocumentSection.HEADERS: b.ccp_hdd,
            DocumentSection.ANNOTATIONS: b.ccp_atn,
        }
        start = 0
        for candidate, length in lengths.items():
            if candidate == section:
                return start, start + length
            start += length
        raise ValueError(f"Unknown section: {section}")

    def get_section(self, section: DocumentSection, filter_text: bool | None = None) -> str:
        """Return the text of one section, optionally cleaned of Word control characters."""
        start, end = self._section_range(DocumentSection(section))
        text = self.get_text_range(start, end)
        if filter_text is None:
            filter_text = settings.filter_text
        return _filter_text(text) if filter_text else text

    def get_body(self, filter_text: bool | None = None) -> str:
        return self.get_section(DocumentSection.BODY, filter_text)

    def get_footnotes(self, filter_text: bool | None = None) -> str:
        return self.get_section(DocumentSection.FOOTNOTES, filter_text)

    def get_headers(self, filter_text: bool | None = None) -> str:
        return self.get_section(DocumentSection.HEADERS, filter_text)

    def get_annotations(self, filter_text: bool | None = None) -> str:
        return self.get_section(DocumentSection.ANNOTATIONS, filter_text)

    def get_bookmark_text(self, name: str) -> str:
        """Return the raw text covered by a bookmark. Raises KeyError for unknown names."""
        bookmark = self.bookmarks[name]
        return self.get_text_range(bookmark.start, bookmark.end)

    def to_dict(self) -> dict:
        return {
            "boundaries": asdict(self.boundaries),
            "piece_count": len(self.pieces),
            "bookmarks": {name: asdict(rng) for name, rng in self.bookmarks.items()},
            "text": join_surrogates(self.text),
        }
