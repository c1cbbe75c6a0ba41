# Mini-DES Test Suite
"""
Test suite including:
- Unit tests for the cipher core
- Attack tests (exhaustive search, known plaintext)
- Integration tests (CLI, audit log)
- Invalid-input tests

Run with: pytest
Coverage: coverage run -m pytest && coverage report
"""
