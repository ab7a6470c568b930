"""Enums for stream names and document sections."""

from enum import StrEnum


class TableStream(StrEnum):
    """Name of the table stream holding the piece table and bookmark tables."""

    ZERO = "0Table"
    ONE = "1Table"


class DocumentSection(StrEnum):
    """Text sections laid out back to back in character-position space."""

    BODY = "body"
    FOOTNOTES = "footnotes"
    HEADERS = "headers"
    ANNOTATIONS = "annotations"
