"""
Exhaustive Key Search

Decrypts one ciphertext block under every one of the 2^9 master keys and
reports the plaintext each key produces. Since the key space is so small,
the full table takes a fraction of a second to produce; this is the whole
point of the exercise.

The search can optionally be sharded over worker processes. Shards are
contiguous key ranges and are reassembled in order, so the result is the
same as the serial search.
"""

import time
from concurrent.futures import ProcessPoolExecutor
from typing import Iterable, Iterator, List, NamedTuple, Optional, Tuple

from ..core_crypto.bit_codec import format_bits
from ..core_crypto.feistel import decrypt, BLOCK_BITS, BLOCK_MASK
from ..core_crypto.key_schedule import KEY_BITS
from ..integration.event_logger import EventLogger


KEY_SPACE = 1 << KEY_BITS  # 512

COLUMN_HEADER = f"{'Key':<15}\t{'Plaintext':<15}"


class Decipherment(NamedTuple):
    """Plaintext obtained by decrypting with one key."""
    key: int
    plaintext: int


def iter_decipherments(ciphertext: int) -> Iterator[Decipherment]:
    """
    Yield (key, plaintext) for every key in ascending order.

    Args:
        ciphertext: 12-bit block

    Yields:
        Decipherment for keys 0..511
    """
    for key in range(KEY_SPACE):
        yield Decipherment(key, decrypt(ciphertext, key))


def _decrypt_shard(ciphertext: int, start: int, stop: int) -> List[Tuple[int, int]]:
    """Decrypt under keys [start, stop); runs inside a worker process."""
    return [(key, decrypt(ciphertext, key)) for key in range(start, stop)]


def shard_key_space(workers: int) -> List[Tuple[int, int]]:
    """
    Split 0..511 into contiguous, ascending (start, stop) ranges.

    Args:
        workers: Number of shards wanted (1-512)

    Returns:
        List of half-open ranges covering the key space exactly once
    """
    if not 1 <= workers <= KEY_SPACE:
        raise ValueError(f"Worker count must be 1-{KEY_SPACE}, got {workers}")

    size, extra = divmod(KEY_SPACE, workers)
    shards = []
    start = 0
    for i in range(workers):
        stop = start + size + (1 if i < extra else 0)
        shards.append((start, stop))
        start = stop
    return shards


def exhaustive_search(
    ciphertext: int,
    workers: int = 1,
    logger: Optional[EventLogger] = None
) -> List[Decipherment]:
    """
    Decrypt a block under all 512 keys.

    Args:
        ciphertext: 12-bit block
        workers: Worker processes to use; 1 runs in-process
        logger: Optional event logger to record the search

    Returns:
        512 Decipherment records, strictly ascending by key

    Raises:
        ValueError: If the ciphertext is not a 12-bit value or the worker
            count is outside 1-512
    """
    if not 0 <= ciphertext <= BLOCK_MASK:
        raise ValueError(f"Ciphertext must be 0-{BLOCK_MASK}, got {ciphertext}")
    shards = shard_key_space(workers)

    if logger is not None:
        logger.log_search_started(ciphertext, KEY_SPACE, workers)
    started = time.perf_counter()

    if workers == 1:
        records = list(iter_decipherments(ciphertext))
    else:
        with ProcessPoolExecutor(max_workers=workers) as executor:
            # map() returns shard results in submission order
            results = executor.map(
                _decrypt_shard,
                [ciphertext] * len(shards),
                [start for start, _ in shards],
                [stop for _, stop in shards],
            )
            records = [Decipherment(k, p) for shard in results for k, p in shard]

    if logger is not None:
        logger.log_search_completed(ciphertext, len(records), time.perf_counter() - started)

    return records


# ============================================================================
# Output formatting
# ============================================================================

def format_ciphertext_line(ciphertext: int) -> str:
    """First output line, e.g. 'Ciphertext: 000000000000 (   0)'."""
    return f"Ciphertext: {format_bits(ciphertext, BLOCK_BITS):>12} ({ciphertext:4d})"


def format_row(record: Decipherment) -> str:
    """One table row: key bits, key decimal, plaintext bits, plaintext decimal."""
    key_bits = format_bits(record.key, KEY_BITS)
    plain_bits = format_bits(record.plaintext, BLOCK_BITS)
    return f"{key_bits:>9} ({record.key:3d})\t{plain_bits:>12} ({record.plaintext:4d})"


def render_table(ciphertext: int, records: Iterable[Decipherment]) -> Iterator[str]:
    """
    Yield every output line (without newlines) for a search result.

    The ciphertext line, the column header, then one row per record.
    """
    yield format_ciphertext_line(ciphertext)
    yield COLUMN_HEADER
    for record in records:
        yield format_row(record)
