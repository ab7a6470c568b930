"""Extraction pipeline: container -> stream buffers -> Document."""

import asyncio
import logging
from functools import partial
from os import PathLike

from worddoc.container import Container, ContainerOpener, OleContainer
from worddoc.exceptions import FormatError, WordExtractionError
from worddoc.services.extraction.assembler import assemble_document
from worddoc.services.extraction.fib import MAIN_STREAM
from worddoc.services.extraction.header import read_header
from worddoc.services.extraction.models import Document

logger = logging.getLogger(__name__)


class WordExtractor:
    """Extract text and bookmarks from Word 97-2003 documents."""

    def __init__(self, opener: ContainerOpener = OleContainer.open):
        self.opener = opener

    async def extract(self, path: str | PathLike) -> Document:
        """
        Decode a document from disk.

        Performance: Runs blocking container I/O in the default thread pool;
        decoding runs on the loop once both streams are in memory.

        Args:
            path: Filesystem path to the .doc file

        Returns:
            Document with boundaries, pieces and bookmarks

        Raises:
            ContainerError: if the container cannot be opened
            StreamError: if a required stream is missing or unreadable
            FormatError: if the document structure is invalid
        """
        loop = asyncio.get_event_loop()
        try:
            container = await loop.run_in_executor(None, partial(self.opener, path))
            try:
                main_buffer = await self._read_stream(loop, container, MAIN_STREAM)
                header = read_header(main_buffer)
                if header.is_encrypted:
                    raise FormatError("Encrypted documents are not supported")
                table_buffer = await self._read_stream(loop, container, header.table_stream)
            finally:
                container.close()

            document = assemble_document(header, main_buffer, table_buffer)
        except WordExtractionError as e:
            logger.warning(f"Word extraction failed for {path}: {type(e).__name__}: {e}")
            raise

        logger.info(
            f"Extracted {path}: {len(document.pieces)} pieces, {len(document.bookmarks)} bookmarks"
        )
        return document

    async def _read_stream(
        self,
        loop: asyncio.AbstractEventLoop,
        container: Container,
        name: str,
    ) -> bytes:
        """Open a named stream and drain it into memory."""
        source = await loop.run_in_executor(None, partial(container.stream, name))
        return await loop.run_in_executor(None, partial(container.read_all, source))


_default_extractor = WordExtractor()


async def extract(path: str | PathLike) -> Document:
    """Decode a document using the default olefile-backed extractor."""
    return await _default_extractor.extract(path)
