"""
Exception types for the vigenere package.
"""


class VigenereError(Exception):
    """Base exception for Vigenère cipher operations."""
    pass


class InvalidKeyError(VigenereError, ValueError):
    """Raised when a key is empty or contains non-Latin letters."""
    pass
