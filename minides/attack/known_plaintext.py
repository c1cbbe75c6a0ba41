"""
Known-Plaintext Key Recovery

With one (plaintext, ciphertext) pair an attacker simply encrypts the
plaintext under all 512 keys and keeps those that match. A 12-bit block
and a 9-bit key usually leave a single candidate; a second pair removes
whatever ambiguity is left.
"""

from typing import List, Optional, Sequence, Tuple

from ..core_crypto.feistel import encrypt, BLOCK_MASK
from ..integration.event_logger import EventLogger
from .key_search import KEY_SPACE


def _check_block(name: str, block: int) -> None:
    if not 0 <= block <= BLOCK_MASK:
        raise ValueError(f"{name} must be 0-{BLOCK_MASK}, got {block}")


def recover_keys(
    plaintext: int,
    ciphertext: int,
    logger: Optional[EventLogger] = None
) -> List[int]:
    """
    Find every key that encrypts `plaintext` to `ciphertext`.

    Args:
        plaintext: Known 12-bit plaintext block
        ciphertext: Matching 12-bit ciphertext block
        logger: Optional event logger

    Returns:
        Candidate keys in ascending order
    """
    return recover_keys_multi([(plaintext, ciphertext)], logger=logger)


def recover_keys_multi(
    pairs: Sequence[Tuple[int, int]],
    logger: Optional[EventLogger] = None
) -> List[int]:
    """
    Find every key consistent with all known (plaintext, ciphertext) pairs.

    Args:
        pairs: Non-empty sequence of (plaintext, ciphertext)
        logger: Optional event logger

    Returns:
        Candidate keys in ascending order

    Raises:
        ValueError: If no pairs are given or a block is out of range
    """
    if not pairs:
        raise ValueError("At least one plaintext/ciphertext pair required")
    for plaintext, ciphertext in pairs:
        _check_block("Plaintext", plaintext)
        _check_block("Ciphertext", ciphertext)

    candidates = [
        key for key in range(KEY_SPACE)
        if all(encrypt(p, key) == c for p, c in pairs)
    ]

    if logger is not None:
        logger.log_keys_recovered(len(pairs), candidates)

    return candidates
