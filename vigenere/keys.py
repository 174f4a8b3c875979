"""
Key schedule derivation.

A key is turned once into a tuple of shifts, one per key letter:
    shift = ord(letter.upper()) - ord('A')      (0-25)

Only the 26 Latin letters are accepted, in either case. Anything else,
including an empty key, raises InvalidKeyError.
"""

import string
from typing import Tuple

from .errors import InvalidKeyError

_LATIN = frozenset(string.ascii_letters)


def build_key_schedule(key: str) -> Tuple[int, ...]:
    if not isinstance(key, str):
        raise InvalidKeyError(f"Vigenère key must be a string, not {type(key).__name__}.")
    if not key:
        raise InvalidKeyError("Vigenère key must not be empty.")
    bad = sorted({ch for ch in key if ch not in _LATIN})
    if bad:
        raise InvalidKeyError(
            f"Vigenère key must contain only letters A-Z; got {''.join(bad)!r}."
        )
    base = ord("A")
    return tuple(ord(ch.upper()) - base for ch in key)
