"""
Mini-DES Feistel Engine

A 12-bit block cipher with a 9-bit key built from four Feistel rounds.
This is for EDUCATIONAL/DEMONSTRATION purposes only - with 512 possible
keys it is broken by trying all of them.

Block layout:
    bits 11..6 = left half (L), bits 5..0 = right half (R)

Encryption round i (i = 1..4):
    (L, R) <- (R, f(R, K_i) XOR L)

Decryption round i (i = 4..1), walking the same registers backwards:
    (L, R) <- (f(L, K_i) XOR R, L)

The halves are not swapped before decryption; the decryption step is the
mirror image of the encryption step instead.
"""

from dataclasses import dataclass
from typing import List, Tuple

from .key_schedule import generate_key_schedule, KEY_MASK
from .round_function import f, HALF_BITS, HALF_MASK


# Cipher parameters
BLOCK_BITS = 12
ROUND_COUNT = 4

BLOCK_MASK = (1 << BLOCK_BITS) - 1  # 0xFFF


@dataclass(frozen=True)
class RoundState:
    """Register contents after one round."""
    round_number: int
    subkey: int
    left: int
    right: int

    @property
    def block(self) -> int:
        """The two halves joined into a 12-bit block."""
        return join_halves(self.left, self.right)

    def __str__(self) -> str:
        return (
            f"Round {self.round_number}: K={self.subkey:08b} "
            f"L={self.left:06b} R={self.right:06b}"
        )


def split_block(block: int) -> Tuple[int, int]:
    """Split a 12-bit block into (left, right) 6-bit halves."""
    block &= BLOCK_MASK
    return (block >> HALF_BITS) & HALF_MASK, block & HALF_MASK


def join_halves(left: int, right: int) -> int:
    """Join two 6-bit halves into a 12-bit block."""
    return ((left & HALF_MASK) << HALF_BITS) | (right & HALF_MASK)


def _round_keys(key: int) -> Tuple[int, ...]:
    subkeys = generate_key_schedule(key)
    if len(subkeys) != ROUND_COUNT:
        raise ValueError(
            f"Key schedule yields {len(subkeys)} subkeys, cipher needs {ROUND_COUNT}"
        )
    return subkeys


def encrypt(plaintext: int, key: int) -> int:
    """
    Encrypt a single 12-bit block.

    Args:
        plaintext: 12-bit block
        key: 9-bit master key

    Returns:
        12-bit ciphertext block
    """
    subkeys = _round_keys(key)
    left, right = split_block(plaintext)

    for i in range(ROUND_COUNT):
        left, right = right, f(right, subkeys[i]) ^ left

    return join_halves(left, right)


def decrypt(ciphertext: int, key: int) -> int:
    """
    Decrypt a single 12-bit block.

    Args:
        ciphertext: 12-bit block
        key: 9-bit master key

    Returns:
        12-bit plaintext block
    """
    subkeys = _round_keys(key)
    left, right = split_block(ciphertext)

    for i in reversed(range(ROUND_COUNT)):
        left, right = f(left, subkeys[i]) ^ right, left

    return join_halves(left, right)


def trace_encrypt(plaintext: int, key: int) -> List[RoundState]:
    """
    Encrypt a block and record the registers after every round.

    Args:
        plaintext: 12-bit block
        key: 9-bit master key

    Returns:
        One RoundState per round; the last one holds the ciphertext
    """
    subkeys = _round_keys(key)
    left, right = split_block(plaintext)
    states = []

    for i in range(ROUND_COUNT):
        left, right = right, f(right, subkeys[i]) ^ left
        states.append(RoundState(i + 1, subkeys[i], left, right))

    return states


def trace_decrypt(ciphertext: int, key: int) -> List[RoundState]:
    """
    Decrypt a block and record the registers after every round.

    Rounds are reported in the order they are undone (4, 3, 2, 1).
    """
    subkeys = _round_keys(key)
    left, right = split_block(ciphertext)
    states = []

    for i in reversed(range(ROUND_COUNT)):
        left, right = f(left, subkeys[i]) ^ right, left
        states.append(RoundState(i + 1, subkeys[i], left, right))

    return states


class MiniDES:
    """
    Mini-DES cipher bound to one master key.

    WARNING: This is for educational purposes only!

    Example:
        >>> cipher = MiniDES(0b101010101)
        >>> ciphertext = cipher.encrypt(0b101010101010)
        >>> cipher.decrypt(ciphertext)
        2730
    """

    def __init__(self, key: int):
        """
        Args:
            key: 9-bit master key (0-511)

        Raises:
            ValueError: If the key is out of range
        """
        if not 0 <= key <= KEY_MASK:
            raise ValueError(f"Master key must be 0-{KEY_MASK}, got {key}")
        self._key = key

    @staticmethod
    def _check_block(block: int) -> None:
        if not 0 <= block <= BLOCK_MASK:
            raise ValueError(f"Block must be 0-{BLOCK_MASK}, got {block}")

    @property
    def key(self) -> int:
        """The 9-bit master key."""
        return self._key

    @property
    def subkeys(self) -> Tuple[int, ...]:
        """Round subkeys K1..K4."""
        return generate_key_schedule(self._key)

    def encrypt(self, block: int) -> int:
        """Encrypt one 12-bit block."""
        self._check_block(block)
        return encrypt(block, self._key)

    def decrypt(self, block: int) -> int:
        """Decrypt one 12-bit block."""
        self._check_block(block)
        return decrypt(block, self._key)

    def trace(self, block: int) -> List[RoundState]:
        """Per-round register states while encrypting `block`."""
        self._check_block(block)
        return trace_encrypt(block, self._key)

    def __repr__(self) -> str:
        return f"MiniDES(key=0b{self._key:09b})"
