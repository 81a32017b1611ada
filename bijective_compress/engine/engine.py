"""
Compression engine.
Compressing k times moves a file k steps down the integer line,
decompressing moves it back up. Both directions are one subtraction.
"""

from bijective_compress.codec.file_codec import FileCodec
from bijective_compress.shared.errors import EmptyFileOverCompress, InsufficientValue
from bijective_compress.shared.log import IntTrace, get_logger

logger = get_logger("engine")


class CompressionEngine:
    """Applies a signed shift to encoded file values."""

    def __init__(self, codec: FileCodec = None):
        self.codec = codec or FileCodec()

    @staticmethod
    def max_compressions(value: int) -> int:
        """Number of compressions left before the file becomes empty."""
        return value

    def apply(self, value: int, shift: int) -> int:
        """
        Return value - shift.
        - shift > 0 compresses, shift < 0 decompresses (no upper bound)
        - Raises EmptyFileOverCompress when compressing the empty file
        - Raises InsufficientValue when the result would be negative
        """
        if value == 0 and shift > 0:
            raise EmptyFileOverCompress()
        if value < shift:
            raise InsufficientValue(self.max_compressions(value))

        result: int = value - shift
        logger.debug("n - compress = %s", IntTrace(result))
        return result

    def compress_bytes(self, data: bytes, shift: int) -> bytes:
        """Encode data, shift it and decode the result."""
        value: int = self.codec.encode(data)
        logger.debug("get (filename) = %s", IntTrace(value))
        return self.codec.decode(self.apply(value, shift))
