"""
Bit String Codec

Conversion between ASCII bit strings ("0101...") and unsigned integers of a
fixed bit width. Only used at the I/O boundary; the cipher core works on
plain integers.

Bit strings are big-endian: the first character is the most significant bit.
"""


class InvalidBitString(ValueError):
    """Raised when a string is not exactly `width` characters of '0'/'1'."""


def parse_bits(s: str, width: int) -> int:
    """
    Parse a big-endian bit string into an integer.

    Args:
        s: String of '0' and '1' characters
        width: Required number of characters

    Returns:
        Integer in [0, 2^width)

    Raises:
        InvalidBitString: If the length is wrong or a character is not 0/1

    Example:
        >>> parse_bits("000000101010", 12)
        42
    """
    if len(s) != width:
        raise InvalidBitString(f"Expected {width} bits, got {len(s)} characters")

    n = 0
    for ch in s:
        if ch not in ('0', '1'):
            raise InvalidBitString(f"Invalid bit character: {ch!r}")
        n = (n << 1) | (ch == '1')
    return n


def format_bits(n: int, width: int) -> str:
    """
    Format an integer as a big-endian bit string of exactly `width` chars.

    The value is reduced modulo 2^width first, and leading zeroes are kept.

    Args:
        n: Non-negative integer
        width: Number of bits to emit

    Returns:
        Bit string, e.g. format_bits(5, 9) == "000000101"
    """
    mask = (1 << width) - 1
    return f"{n & mask:0{width}b}"
