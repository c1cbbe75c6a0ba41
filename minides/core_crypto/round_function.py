"""
Mini-DES Round Function (the f-box)

    r (6 bits) -> expand -> XOR subkey (8 bits) -> split into nibbles
               -> S1(high nibble) || S2(low nibble) -> 6 bits

The expansion is the small analog of DES's E-table: the two middle bits of
the half-block are duplicated, with the copies swapped in one position.
"""

from .sboxes import s1_box, s2_box


HALF_BITS = 6
EXPANDED_BITS = 8

HALF_MASK = (1 << HALF_BITS) - 1          # 0x3F
EXPANDED_MASK = (1 << EXPANDED_BITS) - 1  # 0xFF


def expand(r: int) -> int:
    """
    Expand a 6-bit half-block to 8 bits.

    Output bits 7..0 are taken from input bits r5 r4 r2 r3 r2 r3 r1 r0.

    Args:
        r: 6-bit half-block

    Returns:
        8-bit expanded value

    Example:
        >>> expand(0b101100)
        188
    """
    bit5 = (r >> 5) & 1
    bit4 = (r >> 4) & 1
    bit3 = (r >> 3) & 1
    bit2 = (r >> 2) & 1
    bit1 = (r >> 1) & 1
    bit0 = r & 1

    return (
        (bit5 << 7) | (bit4 << 6) | (bit2 << 5) | (bit3 << 4) |
        (bit2 << 3) | (bit3 << 2) | (bit1 << 1) | (bit0 << 0)
    )


def f(r: int, subkey: int) -> int:
    """
    Round function.

    Args:
        r: 6-bit half-block
        subkey: 8-bit round subkey

    Returns:
        6-bit output
    """
    x = (expand(r & HALF_MASK) ^ subkey) & EXPANDED_MASK
    high_nibble = (x >> 4) & 0b1111
    low_nibble = x & 0b1111
    return (s1_box(high_nibble) << 3) | s2_box(low_nibble)
