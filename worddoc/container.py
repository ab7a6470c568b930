"""Compound file (OLE2) container access using olefile."""

import logging
from collections.abc import Callable
from os import PathLike
from pathlib import Path
from typing import BinaryIO, Protocol

import olefile

from worddoc.config import settings
from worddoc.exceptions import CONTAINER_ERRORS, ContainerError, StreamError

logger = logging.getLogger(__name__)


class Container(Protocol):
    """A compound file exposing named byte streams."""

    def stream(self, name: str) -> BinaryIO: ...

    def read_all(self, source: BinaryIO) -> bytes: ...

    def close(self) -> None: ...


ContainerOpener = Callable[[str | PathLike], Container]


class OleContainer:
    """Container backed by an olefile.OleFileIO instance."""

    def __init__(self, ole: olefile.OleFileIO, path: str | PathLike = "<memory>"):
        self._ole = ole
        self.path = path

    @classmethod
    def open(cls, path: str | PathLike, max_size_bytes: int | None = None) -> "OleContainer":
        """
        Open a compound file from disk.

        Args:
            path: Filesystem path to the document
            max_size_bytes: Largest accepted file size, 0 for no limit
                (defaults to settings.max_file_size_bytes)

        Raises:
            ContainerError: if the file is missing, too large, or not an OLE file
        """
        if max_size_bytes is None:
            max_size_bytes = settings.max_file_size_bytes

        try:
            size = Path(path).stat().st_size
        except CONTAINER_ERRORS as e:
            raise ContainerError(f"Cannot open {path}: {e}") from e

        if max_size_bytes and size > max_size_bytes:
            logger.warning(f"Document too large: {size} bytes (max: {max_size_bytes})")
            raise ContainerError(
                f"{path} is {size} bytes, exceeding the maximum of {max_size_bytes} bytes"
            )

        try:
            ole = olefile.OleFileIO(str(path))
        except CONTAINER_ERRORS as e:
            raise ContainerError(f"Cannot read compound file {path}: {e}") from e

        return cls(ole, path)

    def stream(self, name: str) -> BinaryIO:
        if not self._ole.exists(name):
            raise StreamError(f"Stream {name!r} not found in {self.path}")
        try:
            return self._ole.openstream(name)
        except CONTAINER_ERRORS as e:
            raise StreamError(f"Cannot open stream {name!r} in {self.path}: {e}") from e

    def read_all(self, source: BinaryIO) -> bytes:
        try:
            return source.read()
        except CONTAINER_ERRORS as e:
            raise StreamError(f"Failed reading stream from {self.path}: {e}") from e

    def close(self) -> None:
        self._ole.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
