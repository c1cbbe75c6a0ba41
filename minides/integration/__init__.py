# Integration Module
"""
Audit logging for the decipherer: every search, key recovery and rejected
input is recorded in a hash-chained log.
"""

# Lazy imports to avoid RuntimeWarning when running module directly
def __getattr__(name):
    """Lazy import to avoid circular import issues."""
    from . import event_logger
    return getattr(event_logger, name)

__all__ = [
    'EventType',
    'CipherEvent',
    'AuditEntry',
    'AuditIntegrityError',
    'EventLogger',
]
