"""
Event Logger Module

Records what the decipherer does (searches run, keys recovered, inputs
rejected) in an append-only, hash-chained audit trail.

Features:
- Compact JSON records, one per event
- SHA-256 chaining: each entry digests (previous digest || record)
- Tamper detection by recomputing the chain
- Callbacks notified on every event
- JSON export/import

Author: Mini-DES Project
"""

import json
import time
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, List, Dict, Any, Callable, TextIO

from cryptography.hazmat.primitives import hashes


# ============================================================================
# Constants
# ============================================================================

EVENT_VERSION = "1.0"
GENESIS_DIGEST = b'\x00' * 32


class AuditIntegrityError(Exception):
    """Raised when the audit chain does not verify."""
    pass


def chain_digest(prev_digest: bytes, record: str) -> bytes:
    """
    Compute the digest linking a record to its predecessor.

    Args:
        prev_digest: Digest of the previous entry (32 bytes)
        record: Serialized event record

    Returns:
        SHA-256(prev_digest || record)
    """
    digest = hashes.Hash(hashes.SHA256())
    digest.update(prev_digest)
    digest.update(record.encode())
    return digest.finalize()


# ============================================================================
# Event Types
# ============================================================================

class EventType(Enum):
    """Types of events that can be logged."""

    SEARCH_STARTED = "search_started"
    SEARCH_COMPLETED = "search_completed"
    KEYS_RECOVERED = "keys_recovered"
    INPUT_REJECTED = "input_rejected"


# ============================================================================
# Event Structure
# ============================================================================

@dataclass
class CipherEvent:
    """A single logged event."""
    event_type: EventType
    timestamp: int  # Unix timestamp
    details: Dict[str, Any] = field(default_factory=dict)

    def to_record(self) -> str:
        """Serialize to a compact JSON record."""
        return json.dumps({
            'version': EVENT_VERSION,
            'type': self.event_type.value,
            'time': self.timestamp,
            'details': self.details,
        }, separators=(',', ':'), sort_keys=True)

    @classmethod
    def from_record(cls, record: str) -> 'CipherEvent':
        """Parse an event from its JSON record."""
        data = json.loads(record)
        return cls(
            event_type=EventType(data['type']),
            timestamp=data['time'],
            details=data.get('details', {}),
        )

    def __str__(self) -> str:
        dt = datetime.fromtimestamp(self.timestamp)
        return f"[{dt.strftime('%Y-%m-%d %H:%M:%S')}] {self.event_type.value}"


@dataclass(frozen=True)
class AuditEntry:
    """One link of the audit chain."""
    index: int
    prev_digest: bytes
    digest: bytes
    record: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'index': self.index,
            'prev_digest': self.prev_digest.hex(),
            'digest': self.digest.hex(),
            'record': self.record,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AuditEntry':
        return cls(
            index=data['index'],
            prev_digest=bytes.fromhex(data['prev_digest']),
            digest=bytes.fromhex(data['digest']),
            record=data['record'],
        )


# ============================================================================
# Event Logger
# ============================================================================

class EventLogger:
    """
    Hash-chained event logger for the decipherer.

    Every event is appended to a chain in which each entry commits to the
    one before it, so editing or dropping an entry breaks verification.
    """

    def __init__(self, entries: Optional[List[AuditEntry]] = None):
        """
        Initialize the event logger.

        Args:
            entries: Optional existing chain (e.g. from import_log)
        """
        self._entries: List[AuditEntry] = list(entries) if entries else []
        self._callbacks: List[Callable[[CipherEvent], None]] = []

    def _add_event(self, event: CipherEvent) -> CipherEvent:
        """Append an event to the chain and notify callbacks."""
        record = event.to_record()
        prev = self._entries[-1].digest if self._entries else GENESIS_DIGEST
        self._entries.append(AuditEntry(
            index=len(self._entries),
            prev_digest=prev,
            digest=chain_digest(prev, record),
            record=record,
        ))

        for callback in self._callbacks:
            callback(event)

        return event

    def add_callback(self, callback: Callable[[CipherEvent], None]) -> None:
        """Add a callback to be notified of new events."""
        self._callbacks.append(callback)

    def remove_callback(self, callback: Callable[[CipherEvent], None]) -> None:
        """Remove a callback."""
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    # ========================================================================
    # Search Events
    # ========================================================================

    def log_search_started(self, ciphertext: int, key_count: int, workers: int = 1) -> CipherEvent:
        """
        Log the start of an exhaustive key search.

        Args:
            ciphertext: The 12-bit block being attacked
            key_count: Number of keys that will be tried
            workers: Number of worker processes

        Returns:
            The logged event
        """
        event = CipherEvent(
            event_type=EventType.SEARCH_STARTED,
            timestamp=int(time.time()),
            details={
                'ciphertext': ciphertext,
                'keys': key_count,
                'workers': workers,
            }
        )
        return self._add_event(event)

    def log_search_completed(self, ciphertext: int, rows: int, elapsed: float) -> CipherEvent:
        """Log the end of an exhaustive key search."""
        event = CipherEvent(
            event_type=EventType.SEARCH_COMPLETED,
            timestamp=int(time.time()),
            details={
                'ciphertext': ciphertext,
                'rows': rows,
                'elapsed_ms': round(elapsed * 1000, 3),
            }
        )
        return self._add_event(event)

    def log_keys_recovered(self, pair_count: int, keys: List[int]) -> CipherEvent:
        """
        Log the result of a known-plaintext key recovery.

        Args:
            pair_count: Number of (plaintext, ciphertext) pairs used
            keys: Candidate keys consistent with every pair
        """
        event = CipherEvent(
            event_type=EventType.KEYS_RECOVERED,
            timestamp=int(time.time()),
            details={
                'pairs': pair_count,
                'candidates': len(keys),
                'keys': list(keys),
            }
        )
        return self._add_event(event)

    def log_input_rejected(self, reason: str) -> CipherEvent:
        """Log a rejected command-line input."""
        event = CipherEvent(
            event_type=EventType.INPUT_REJECTED,
            timestamp=int(time.time()),
            details={'reason': reason},
        )
        return self._add_event(event)

    # ========================================================================
    # Retrieval
    # ========================================================================

    @property
    def entries(self) -> List[AuditEntry]:
        """Copy of the audit chain."""
        return self._entries.copy()

    @property
    def length(self) -> int:
        return len(self._entries)

    def get_all_events(self) -> List[CipherEvent]:
        """Retrieve all logged events in order."""
        return [CipherEvent.from_record(entry.record) for entry in self._entries]

    def get_events_by_type(self, event_type: EventType) -> List[CipherEvent]:
        """Get all events of a specific type."""
        return [e for e in self.get_all_events() if e.event_type == event_type]

    def get_recent_events(self, count: int = 10) -> List[CipherEvent]:
        """Get the most recent events."""
        events = self.get_all_events()
        return events[-count:] if len(events) > count else events

    def print_audit_log(self, last_n: Optional[int] = None, stream: Optional[TextIO] = None) -> None:
        """Print the audit log in a readable format."""
        events = self.get_all_events()
        if last_n:
            events = events[-last_n:]

        out = {'file': stream} if stream is not None else {}
        print("\n" + "=" * 70, **out)
        print("AUDIT LOG", **out)
        print("=" * 70, **out)

        for event in events:
            print(event, **out)
            for k, v in event.details.items():
                print(f"    {k}: {v}", **out)

        print("=" * 70, **out)
        print(f"Total events: {self.length}", **out)
        print("=" * 70, **out)

    # ========================================================================
    # Integrity
    # ========================================================================

    def validate_chain(self) -> bool:
        """
        Recompute every link of the chain.

        Returns:
            True if the chain is intact

        Raises:
            AuditIntegrityError: On the first entry that does not verify
        """
        prev = GENESIS_DIGEST
        for position, entry in enumerate(self._entries):
            if entry.index != position:
                raise AuditIntegrityError(
                    f"Entry {position} has index {entry.index}"
                )
            if entry.prev_digest != prev:
                raise AuditIntegrityError(f"Entry {position}: previous digest mismatch")
            if chain_digest(prev, entry.record) != entry.digest:
                raise AuditIntegrityError(f"Entry {position}: digest mismatch")
            prev = entry.digest
        return True

    def verify_integrity(self) -> bool:
        """Verify the integrity of the audit log."""
        try:
            return self.validate_chain()
        except AuditIntegrityError:
            return False

    def export_log(self) -> str:
        """Export the entire audit log as JSON."""
        return json.dumps([entry.to_dict() for entry in self._entries], indent=2)

    @classmethod
    def import_log(cls, json_str: str) -> 'EventLogger':
        """Import an audit log from JSON."""
        entries = [AuditEntry.from_dict(d) for d in json.loads(json_str)]
        return cls(entries=entries)
