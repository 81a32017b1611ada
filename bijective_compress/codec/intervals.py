"""
Size interval arithmetic for the file <-> integer bijection.
Files of length N form size category N, which holds base^N integers.
Categories are laid out back to back starting from 0:
- category 0 (the empty file) is {0}
- category 1 starts at 1, category 2 at 1 + base, and so on
All computations are exact integer arithmetic, never floating point.
"""

from bijective_compress.shared.config import DIGIT_BITS


class SizeIntervalMath:
    """Locates size categories in the space of non-negative integers."""

    def __init__(self, digit_bits: int = DIGIT_BITS):
        if digit_bits < 1:
            raise ValueError(f"digit_bits must be positive, got {digit_bits}")
        self.digit_bits = digit_bits
        self.base = 1 << digit_bits
        self.ratio = self.base - 1    # 255 for byte digits

    def category_size(self, n: int) -> int:
        """Number of files of length n, i.e. base^n."""
        if n < 0:
            raise ValueError(f"Category must be non-negative, got {n}")
        return 1 << (self.digit_bits * n)

    def category_start(self, n: int) -> int:
        """
        Return the first integer of size category n.
        Geometric sum base^0 + ... + base^(n-1) = (base^n - 1) / (base - 1),
        built by setting bit digit_bits*n, subtracting 1 and floor dividing.
        """
        return (self.category_size(n) - 1) // self.ratio

    def category_of(self, value: int) -> int:
        """
        Return the unique n with category_start(n) <= value < category_start(n + 1).
        Solves n = floor(log_base(ratio * value + 1)) through the bit length:
        a number with b bits lies in [2^(b-1), 2^b), so its base log floors to
        (b - 1) // digit_bits.
        """
        if value < 0:
            raise ValueError(f"Encoded value must be non-negative, got {value}")
        return ((self.ratio * value + 1).bit_length() - 1) // self.digit_bits
