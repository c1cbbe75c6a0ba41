# Core Cryptography Module
"""
Mini-DES cipher implementation including:
- Bit string codec
- Key schedule
- Expansion and round function
- S-boxes
- Feistel encryption/decryption
"""
