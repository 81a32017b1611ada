"""
Error types raised by the codec, the engine and the file layer.
Every error is fatal: the CLI prints its message and exits with status 1.
"""


class CompressError(Exception):
    """Base class for every user-visible failure."""


class FileAccessError(CompressError):
    """The target file cannot be opened, read or written."""

    def __init__(self, message: str = "Unable to access file."):
        super().__init__(message)


class InvalidArgument(CompressError, ValueError):
    """Malformed command line or a -C/-D operand that is not an integer."""


class EmptyFileOverCompress(CompressError):
    """A zero-length file has no predecessor and cannot be compressed."""

    def __init__(self, message: str = "Cannot compress a zero-length file."):
        super().__init__(message)


class InsufficientValue(CompressError):
    """The requested compression count would produce a negative encoded value."""

    def __init__(self, max_count: int):
        self.max_count = max_count
        super().__init__(
            "Cannot compress that much.\n"
            f"Hint: compressing {max_count} time(s) will make a zero-length file."
        )
