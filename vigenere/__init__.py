"""
vigenere
========
The Vigenère polyalphabetic substitution cipher for Python text.

Two layers:
    VigenereStream / encrypt_stream / decrypt_stream
        Lazy per-character transform over any iterable of characters,
        with case and non-letter policies.
    VigenereCipher / encrypt / decrypt
        Whole-string convenience API on top of the stream.

Only A-Z and a-z are shifted. The key cursor advances on letters only.
This is a historical cipher and offers no real secrecy.
"""

__version__ = "1.0.0"

from .errors  import VigenereError, InvalidKeyError
from .options import Mode, ForceCase, NonLetterMode, StreamOptions
from .keys    import build_key_schedule
from .stream  import VigenereStream, encrypt_stream, decrypt_stream
from .cipher  import VigenereCipher, encrypt, decrypt

__all__ = [
    "VigenereError",
    "InvalidKeyError",
    "Mode",
    "ForceCase",
    "NonLetterMode",
    "StreamOptions",
    "build_key_schedule",
    "VigenereStream",
    "encrypt_stream",
    "decrypt_stream",
    "VigenereCipher",
    "encrypt",
    "decrypt",
]
