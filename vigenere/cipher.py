"""
Vigenère whole-string API
=========================
Blaise de Vigenère, 1553. Called "le chiffre indéchiffrable" for 300
years. Not modern-secure: the repeating key falls to Kasiski and
Friedman analysis. Use it for puzzles, teaching and legacy formats.

VigenereCipher wraps the lazy stream transform for callers who have
the whole text in hand:

    >>> cipher = VigenereCipher("WHYRUST")
    >>> cipher.encrypt("TO EMPOWER EVERYONE")
    'PV CDJGPAY CMYJRKUC'
    >>> cipher.decrypt("PV CDJGPAY CMYJRKUC")
    'TO EMPOWER EVERYONE'

Letters keep their case and everything else passes through, so the
output is always as long as the input unless SKIP is requested.
"""

import logging
from typing import Optional

from .keys import build_key_schedule
from .options import ForceCase, NonLetterMode
from .stream import decrypt_stream, encrypt_stream

logger = logging.getLogger(__name__)


class VigenereCipher:
    """Classic Vigenère encryption over whole strings."""

    def __init__(self, key: str):
        """
        Key case is irrelevant ("lemon" == "LEMON").
        Raises InvalidKeyError if the key is empty or not alphabetic.
        """
        build_key_schedule(key)
        self._key = key
        logger.debug(f"VigenereCipher ready | key_len={len(key)}")

    @property
    def key(self) -> str:
        return self._key

    def encrypt(self, plain_text: str,
                force_case: Optional[ForceCase] = None,
                non_letter_mode: Optional[NonLetterMode] = None) -> str:
        """Encrypt plain_text. Non-letters pass through by default."""
        return "".join(encrypt_stream(plain_text, self._key,
                                      force_case=force_case,
                                      non_letter_mode=non_letter_mode))

    def decrypt(self, cipher_text: str,
                force_case: Optional[ForceCase] = None,
                non_letter_mode: Optional[NonLetterMode] = None) -> str:
        """Decrypt cipher_text."""
        return "".join(decrypt_stream(cipher_text, self._key,
                                      force_case=force_case,
                                      non_letter_mode=non_letter_mode))

    def __repr__(self):
        return f"VigenereCipher(key_len={len(self._key)})"


def encrypt(plain_text: str, key: str) -> str:
    return VigenereCipher(key).encrypt(plain_text)


def decrypt(cipher_text: str, key: str) -> str:
    return VigenereCipher(key).decrypt(cipher_text)
