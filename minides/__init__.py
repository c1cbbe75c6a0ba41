# Mini-DES
"""
A textbook 12-bit Feistel cipher with a 9-bit key, and the exhaustive key
search that breaks it.

EDUCATIONAL/DEMONSTRATION purposes only.
"""

__version__ = "1.0.0"
