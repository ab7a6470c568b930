"""Exception taxonomy for document extraction errors.

Every error is fatal for the extraction call that raised it; nothing is retried.
"""


class WordExtractionError(Exception):
    """Base class for extraction errors."""

    pass


class ContainerError(WordExtractionError):
    """The compound file container could not be opened or read.

    Examples: file not found, not an OLE file, file too large.
    """

    pass


class StreamError(WordExtractionError):
    """A named stream is missing from the container or could not be read fully."""

    pass


class FormatError(WordExtractionError):
    """The document structure failed validation.

    Examples: invalid magic number, corrupted piece table, unsupported
    bookmark name encoding, reads past the end of a stream.
    """

    pass


# External exceptions raised by the container library and file I/O
CONTAINER_ERRORS = (
    OSError,  # olefile.OleFileError and NotOleFileError derive from OSError
    EOFError,
)
