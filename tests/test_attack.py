"""
Unit tests for the key-search attacks.

Tests:
- Exhaustive search completeness and ordering
- Sharded search
- Table formatting
- Known-plaintext key recovery
"""

import pytest
from minides.core_crypto.feistel import encrypt, decrypt
from minides.attack.key_search import (
    exhaustive_search, iter_decipherments, shard_key_space, Decipherment,
    render_table, format_row, format_ciphertext_line, COLUMN_HEADER, KEY_SPACE
)
from minides.attack.known_plaintext import recover_keys, recover_keys_multi
from minides.integration.event_logger import EventLogger


class TestExhaustiveSearch:
    """Tests for the exhaustive search driver."""

    def test_key_space_size(self):
        assert KEY_SPACE == 512

    def test_every_key_once_in_order(self):
        records = exhaustive_search(0)
        assert [r.key for r in records] == list(range(512))

    def test_records_are_decryptions(self):
        ciphertext = 0b110011001100
        for record in exhaustive_search(ciphertext):
            assert record.plaintext == decrypt(ciphertext, record.key)

    def test_key_zero_of_zero_ciphertext(self):
        assert exhaustive_search(0)[0] == Decipherment(0, 2772)

    def test_generator_matches_list(self):
        assert list(iter_decipherments(1234)) == exhaustive_search(1234)

    def test_true_key_found(self):
        """The real key decrypts back to the original plaintext."""
        ciphertext = encrypt(2730, 341)
        records = exhaustive_search(ciphertext)
        assert records[341].plaintext == 2730

    def test_rejects_out_of_range_block(self):
        with pytest.raises(ValueError):
            exhaustive_search(4096)


class TestShardedSearch:
    """Tests for splitting the key space across workers."""

    def test_single_shard(self):
        assert shard_key_space(1) == [(0, 512)]

    def test_uneven_shards_cover_key_space(self):
        shards = shard_key_space(3)
        assert shards == [(0, 171), (171, 342), (342, 512)]

    def test_shards_contiguous(self):
        for workers in (2, 5, 7, 512):
            shards = shard_key_space(workers)
            assert shards[0][0] == 0
            assert shards[-1][1] == 512
            for (_, stop), (start, _) in zip(shards, shards[1:]):
                assert stop == start

    def test_bad_worker_count(self):
        with pytest.raises(ValueError):
            shard_key_space(0)
        with pytest.raises(ValueError):
            shard_key_space(513)

    def test_parallel_matches_serial(self):
        assert exhaustive_search(2730, workers=3) == exhaustive_search(2730)

    @pytest.mark.parametrize("workers", [0, -1, 513])
    def test_bad_worker_count_logs_nothing(self, workers):
        """A rejected worker count fails before anything is logged."""
        logger = EventLogger()
        with pytest.raises(ValueError):
            exhaustive_search(0, workers=workers, logger=logger)
        assert logger.get_all_events() == []
        assert logger.length == 0


class TestTableFormatting:
    """Tests for the printed table."""

    def test_ciphertext_line(self):
        assert format_ciphertext_line(0) == "Ciphertext: 000000000000 (   0)"
        assert format_ciphertext_line(2730) == "Ciphertext: 101010101010 (2730)"

    def test_column_header(self):
        assert COLUMN_HEADER == "Key            \tPlaintext      "

    def test_row(self):
        assert format_row(Decipherment(0, 2772)) == "000000000 (  0)\t101011010100 (2772)"
        assert format_row(Decipherment(511, 5)) == "111111111 (511)\t000000000101 (   5)"

    def test_render_line_count(self):
        lines = list(render_table(0, exhaustive_search(0)))
        assert len(lines) == 514
        assert lines[0].startswith("Ciphertext: ")
        assert lines[1] == COLUMN_HEADER


class TestKnownPlaintext:
    """Tests for known-plaintext key recovery."""

    @pytest.mark.parametrize("key", [0, 1, 100, 341, 511])
    def test_true_key_among_candidates(self, key):
        plaintext = 0b011011011011
        assert key in recover_keys(plaintext, encrypt(plaintext, key))

    def test_candidates_are_consistent(self):
        plaintext = 1111
        ciphertext = encrypt(plaintext, 222)
        for key in recover_keys(plaintext, ciphertext):
            assert encrypt(plaintext, key) == ciphertext

    def test_candidates_ascending(self):
        candidates = recover_keys(0, encrypt(0, 300))
        assert candidates == sorted(set(candidates))

    def test_more_pairs_never_add_candidates(self):
        key = 341
        pairs = [(p, encrypt(p, key)) for p in (2730, 15, 3840)]
        one = recover_keys(*pairs[0])
        many = recover_keys_multi(pairs)
        assert key in many
        assert set(many) <= set(one)

    def test_no_pairs_rejected(self):
        with pytest.raises(ValueError):
            recover_keys_multi([])

    def test_out_of_range_rejected(self):
        with pytest.raises(ValueError):
            recover_keys(5000, 0)
