# Attack Module
"""
Key-search attacks on mini-DES:
- Exhaustive search over all 512 keys for one ciphertext
- Known-plaintext key recovery
"""

# Lazy imports to avoid RuntimeWarning when running module directly
def __getattr__(name):
    """Lazy import to avoid circular import issues."""
    if name in ('recover_keys', 'recover_keys_multi'):
        from . import known_plaintext
        return getattr(known_plaintext, name)
    from . import key_search
    return getattr(key_search, name)

__all__ = [
    'Decipherment',
    'exhaustive_search',
    'iter_decipherments',
    'shard_key_space',
    'render_table',
    'format_row',
    'format_ciphertext_line',
    'recover_keys',
    'recover_keys_multi',
    'KEY_SPACE',
]
