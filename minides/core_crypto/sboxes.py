"""
Mini-DES S-boxes

Two substitution tables, each mapping a 4-bit input to a 3-bit output.
The leftmost input bit selects the row, the three rightmost bits select
the column.
"""

from typing import List


# Each row lists the 3-bit outputs for columns 000..111
S1_BOX: List[List[int]] = [
    [0b101, 0b010, 0b001, 0b110, 0b011, 0b100, 0b111, 0b000],
    [0b001, 0b100, 0b110, 0b010, 0b000, 0b111, 0b101, 0b011],
]

S2_BOX: List[List[int]] = [
    [0b100, 0b000, 0b110, 0b101, 0b111, 0b001, 0b011, 0b010],
    [0b101, 0b011, 0b000, 0b111, 0b110, 0b010, 0b001, 0b100],
]


def sbox_lookup(table: List[List[int]], n: int) -> int:
    """
    Look up a 4-bit value in an S-box table.

    Args:
        table: 2x8 S-box table
        n: Input value; only the low 4 bits are used

    Returns:
        3-bit table entry
    """
    four_bits = n & 0b1111
    row = four_bits >> 3
    column = four_bits & 0b111
    return table[row][column]


def s1_box(n: int) -> int:
    """Apply S-box 1 to a 4-bit value."""
    return sbox_lookup(S1_BOX, n)


def s2_box(n: int) -> int:
    """Apply S-box 2 to a 4-bit value."""
    return sbox_lookup(S2_BOX, n)
