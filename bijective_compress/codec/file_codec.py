"""
Bijective codec between byte sequences and non-negative integers.
A file of N bytes maps to category_start(N) + M, where M reads the bytes
as a little-endian base-256 number (byte 0 is the least significant digit).
"""

from bijective_compress.codec.intervals import SizeIntervalMath
from bijective_compress.shared.log import IntTrace, get_logger

logger = get_logger("codec")


class FileCodec:
    """Converts file contents to their integer and back."""

    def __init__(self, intervals: SizeIntervalMath = None):
        self.intervals = intervals or SizeIntervalMath()
        if self.intervals.digit_bits % 8 != 0:
            raise ValueError("FileCodec needs whole-byte digits")
        self.digit_bytes = self.intervals.digit_bits // 8

    def encode(self, data: bytes) -> int:
        """
        Return the unique integer of a byte sequence.
        - Interval base is the first integer of the size category
        - Interval offset is the content read as a little-endian number
        """
        if len(data) % self.digit_bytes != 0:
            raise ValueError(f"Data length {len(data)} is not a multiple of {self.digit_bytes}")
        size: int = len(data) // self.digit_bytes
        logger.debug("get: filesize = %d", size)

        base: int = self.intervals.category_start(size)
        logger.debug("get: interval base = %s", IntTrace(base))

        offset: int = int.from_bytes(data, "little")
        logger.debug("get: interval offset = %s", IntTrace(offset))

        return base + offset

    def decode(self, value: int) -> bytes:
        """
        Return the unique byte sequence designated by a non-negative integer.
        Output is exactly the category length: the offset is exported little-endian
        and zero-filled in its high-order bytes.
        """
        size: int = self.intervals.category_of(value)
        logger.debug("put: filesize = %d", size)

        base: int = self.intervals.category_start(size)
        logger.debug("put: interval base = %s", IntTrace(base))

        offset: int = value - base
        logger.debug("put: interval offset = %s", IntTrace(offset))

        # Fresh buffer sized to this category, never shared between calls
        return offset.to_bytes(size * self.digit_bytes, "little")
