"""Fragment decoding and plain-text cleanup for Word character data."""

import re
import struct

# Word special characters and their plain-text replacements
_TRANSLATIONS = {
    0x2002: " ",  # en space
    0x2003: " ",  # em space
    0x2012: "-",  # figure dash
    0x2013: "-",  # en dash
    0x2014: "-",  # em dash
    0x2018: "'",
    0x2019: "'",
    0x201C: '"',
    0x201D: '"',
    0x000D: "\n",  # paragraph mark
    0x000B: "\n",  # hard line break
    0x0007: "\t",  # table cell mark
    0x0008: "",  # drawn object anchor
    0x0005: "",  # annotation reference
    0x0002: "",  # auto-numbered footnote reference
    0x0013: "",  # field begin
    0x0014: "",  # field separator
    0x0015: "",  # field end
}

_SPECIAL_CHARS = re.compile("[" + "".join(re.escape(chr(c)) for c in _TRANSLATIONS) + "]")


def decode_single_byte(raw: bytes) -> str:
    """Decode single-byte text as a binary passthrough (one char per byte)."""
    return raw.decode("latin-1")


def decode_double_byte(raw: bytes) -> str:
    """Decode UTF-16LE text one code unit per character.

    Surrogate pairs stay as two characters so that text length matches the
    character-position count of the piece.
    """
    units = struct.unpack(f"<{len(raw) // 2}H", raw[: len(raw) // 2 * 2])
    return "".join(map(chr, units))


def decode_utf16(raw: bytes) -> str:
    """Decode a UTF-16LE string such as a bookmark name, keeping any lone surrogates."""
    return raw.decode("utf-16-le", errors="surrogatepass")


def join_surrogates(text: str) -> str:
    """Combine surrogate pairs into single characters for display.

    Unpaired surrogates become U+FFFD.
    """
    return text.encode("utf-16-le", errors="surrogatepass").decode("utf-16-le", errors="replace")


def filter_text(text: str) -> str:
    """Replace Word control and typographic characters with plain-text equivalents."""
    return join_surrogates(_SPECIAL_CHARS.sub(lambda m: _TRANSLATIONS[ord(m.group())], text))
