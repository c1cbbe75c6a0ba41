"""
Mini-DES Key Schedule

Derives the four 8-bit round subkeys from a 9-bit master key. The schedule
is a fixed set of bit selections and rotations with no S-box involvement:

    K1 = key bits 8..1
    K2 = key bits 7..0
    K3 = key bits 6..0 followed by bit 8
    K4 = key bits 5..0 followed by bits 8..7

K2 carries a second term `(key & 0b000000000) >> 9` that is always zero.
It is kept as written in the textbook schedule; the published value tables
depend on K2 being exactly the low byte of the key.
"""

from typing import Tuple


# Schedule parameters
KEY_BITS = 9
SUBKEY_BITS = 8
NUM_SUBKEYS = 4

KEY_MASK = (1 << KEY_BITS) - 1         # 0x1FF
SUBKEY_MASK = (1 << SUBKEY_BITS) - 1   # 0xFF


def generate_key_schedule(key: int) -> Tuple[int, int, int, int]:
    """
    Generate the round subkeys for a master key.

    Args:
        key: 9-bit master key (0-511)

    Returns:
        Tuple (K1, K2, K3, K4); K1 is used in round 1 of encryption

    Example:
        >>> generate_key_schedule(0b101010101)
        (170, 85, 171, 86)
    """
    key &= KEY_MASK

    key1 = (key & 0b111111110) >> 1
    key2 = ((key & 0b011111111) << 0) | ((key & 0b000000000) >> 9)
    key3 = ((key & 0b001111111) << 1) | ((key & 0b100000000) >> 8)
    key4 = ((key & 0b000111111) << 2) | ((key & 0b110000000) >> 7)

    return (
        key1 & SUBKEY_MASK,
        key2 & SUBKEY_MASK,
        key3 & SUBKEY_MASK,
        key4 & SUBKEY_MASK,
    )


class KeySchedule:
    """
    Class-based interface to the key schedule with 1-indexed round access.

    Example:
        >>> schedule = KeySchedule(0b101010101)
        >>> schedule.get_subkey(1)
        170
        >>> schedule.subkeys
        (170, 85, 171, 86)
    """

    def __init__(self, key: int):
        """
        Args:
            key: 9-bit master key

        Raises:
            ValueError: If key is outside 0-511
        """
        if not 0 <= key <= KEY_MASK:
            raise ValueError(f"Master key must be 0-{KEY_MASK}, got {key}")

        self._key = key
        self._subkeys = generate_key_schedule(key)

    @property
    def key(self) -> int:
        """Original 9-bit master key."""
        return self._key

    @property
    def subkeys(self) -> Tuple[int, ...]:
        """All subkeys in round order."""
        return self._subkeys

    def get_subkey(self, round_num: int) -> int:
        """
        Get the subkey for a round.

        Args:
            round_num: Round number (1-4)

        Returns:
            8-bit subkey
        """
        if not 1 <= round_num <= NUM_SUBKEYS:
            raise ValueError(f"Round number must be 1-{NUM_SUBKEYS}, got {round_num}")
        return self._subkeys[round_num - 1]

    def __len__(self) -> int:
        return len(self._subkeys)

    def __repr__(self) -> str:
        return f"KeySchedule(key=0b{self._key:09b})"
