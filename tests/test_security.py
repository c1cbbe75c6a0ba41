"""
Invalid-input and tampering tests for Mini-DES.

Tests:
- Malformed command lines
- Audit log tampering
"""

import io
import json

import pytest
from minides.main import main, parse_arguments, WrongArgumentCount, USAGE
from minides.core_crypto.bit_codec import InvalidBitString
from minides.attack.key_search import exhaustive_search
from minides.integration.event_logger import (
    EventLogger, AuditEntry, AuditIntegrityError, chain_digest, GENESIS_DIGEST
)


def run_cli(*args):
    out, err = io.StringIO(), io.StringIO()
    status = main(list(args), stdout=out, stderr=err)
    return status, out.getvalue(), err.getvalue()


class TestBadArguments:
    """Malformed command lines exit 1 with a one-line diagnostic."""

    def test_no_arguments(self):
        status, out, err = run_cli()
        assert status == 1
        assert "Usage" in err
        assert out == ""

    def test_two_arguments(self):
        status, out, err = run_cli("000000000000", "000000000000")
        assert status == 1
        assert "Usage" in err
        assert out == ""

    def test_invalid_characters(self):
        status, out, err = run_cli("00000000002z")
        assert status == 1
        assert out == ""
        assert err.count("\n") == 1

    def test_wrong_length(self):
        status, out, err = run_cli("0101")
        assert status == 1
        assert "12 ones and zeroes" in err

    def test_too_long(self):
        status, _, _ = run_cli("0000000000000")
        assert status == 1

    @pytest.mark.parametrize("bad", ["", " 00000000000", "0000000000 1", "２２２２２２２２２２２２"])
    def test_other_garbage(self, bad):
        status, _, _ = run_cli(bad)
        assert status == 1

    def test_parse_arguments_errors(self):
        with pytest.raises(WrongArgumentCount, match="Usage"):
            parse_arguments([])
        with pytest.raises(InvalidBitString):
            parse_arguments(["abcdefghijkl"])

    def test_parse_arguments_value(self):
        assert parse_arguments(["000000101010"]) == 42

    def test_usage_names_program(self):
        assert USAGE.startswith("Usage: minides-decipher")


class TestAuditTampering:
    """The hash chain detects modified, dropped or reordered entries."""

    def _logger_with_events(self):
        logger = EventLogger()
        exhaustive_search(0, logger=logger)
        logger.log_input_rejected("WrongArgumentCount")
        return logger

    def test_intact_chain_verifies(self):
        logger = self._logger_with_events()
        assert logger.validate_chain()

    def test_first_digest_links_to_genesis(self):
        logger = self._logger_with_events()
        first = logger.entries[0]
        assert first.prev_digest == GENESIS_DIGEST
        assert first.digest == chain_digest(GENESIS_DIGEST, first.record)
        assert len(first.digest) == 32

    def test_modified_record_detected(self):
        logger = self._logger_with_events()
        entry = logger.entries[1]
        forged = AuditEntry(entry.index, entry.prev_digest, entry.digest,
                            entry.record.replace('"rows":512', '"rows":1'))
        tampered = EventLogger(entries=logger.entries[:1] + [forged] + logger.entries[2:])

        assert not tampered.verify_integrity()
        with pytest.raises(AuditIntegrityError):
            tampered.validate_chain()

    def test_dropped_entry_detected(self):
        logger = self._logger_with_events()
        entries = logger.entries
        tampered = EventLogger(entries=[entries[0], entries[2]])
        assert not tampered.verify_integrity()

    def test_reordered_entries_detected(self):
        logger = self._logger_with_events()
        entries = logger.entries
        tampered = EventLogger(entries=[entries[1], entries[0], entries[2]])
        assert not tampered.verify_integrity()

    def test_tampered_export_detected(self):
        logger = self._logger_with_events()
        data = json.loads(logger.export_log())
        data[0]['record'] = data[0]['record'].replace('"ciphertext":0', '"ciphertext":1')
        restored = EventLogger.import_log(json.dumps(data))
        assert not restored.verify_integrity()

    def test_callback_errors_propagate(self):
        logger = EventLogger()

        def broken(event):
            raise RuntimeError("callback failed")

        logger.add_callback(broken)
        with pytest.raises(RuntimeError):
            logger.log_input_rejected("InvalidBitString")
