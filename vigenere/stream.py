"""
Vigenère stream transform
=========================
Lazy, per-character Vigenère encryption and decryption over any
iterable of characters.

Each call to next() pulls characters from the source until one produces
output, so a stream never buffers more than a single character. That
makes it safe over very large or infinite sources:

    >>> from itertools import cycle, islice
    >>> "".join(islice(encrypt_stream(cycle("AB"), "B"), 4))
    'BCBC'

The key cursor advances only on letters. Spaces, digits and punctuation
never consume a key position, whether they are kept or skipped, so key
alignment is computed over the letter subsequence of the input alone.

Streams compose with each other and with ordinary iterator tools:

    >>> "".join(decrypt_stream(encrypt_stream("Attack at dawn", "LEMON"), "LEMON"))
    'Attack at dawn'

A stream instance owns its cursor and is not safe to share between
threads. Construct one stream per partition of input instead.
"""

import logging
from typing import Iterable, Iterator, Optional, Tuple

from .keys import build_key_schedule
from .options import DEFAULT_OPTIONS, ForceCase, Mode, NonLetterMode, StreamOptions

logger = logging.getLogger(__name__)


class VigenereStream:
    """Iterator that encrypts or decrypts the characters of `source`."""

    ALPHABET_SIZE = 26
    UPPER_BASE    = ord("A")
    LOWER_BASE    = ord("a")

    def __init__(self, source: Iterable[str], key: str, mode: Mode,
                 options: Optional[StreamOptions] = None):
        if not isinstance(mode, Mode):
            raise TypeError(f"mode must be a Mode, not {type(mode).__name__}")
        self._schedule = build_key_schedule(key)
        self._mode     = mode
        self._options  = options if options is not None else DEFAULT_OPTIONS
        self._source   = iter(source)
        self._cursor   = 0
        self._letters  = 0
        logger.debug(
            f"VigenereStream {mode.value} | key_len={len(self._schedule)} "
            f"force_case={self._options.force_case.value} "
            f"non_letters={self._options.non_letter_mode.value}"
        )

    # ── introspection ────────────────────────────────────────────────────────

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def options(self) -> StreamOptions:
        return self._options

    @property
    def key_schedule(self) -> Tuple[int, ...]:
        return self._schedule

    @property
    def cursor(self) -> int:
        """Index of the shift the next letter will use."""
        return self._cursor

    # ── iterator protocol ────────────────────────────────────────────────────

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        if self._source is None:
            raise StopIteration
        for ch in self._source:
            out = self._step(ch)
            if out is not None:
                return out
        # Drop the source so an exhausted stream never pulls from it again.
        self._source = None
        logger.debug(f"VigenereStream {self._mode.value} exhausted after {self._letters} letters")
        raise StopIteration

    # ── transform step ───────────────────────────────────────────────────────

    def _step(self, ch: str) -> Optional[str]:
        """Transform one character. Returns None when it is skipped."""
        if not isinstance(ch, str) or len(ch) != 1:
            raise TypeError(f"VigenereStream source must yield single characters, got {ch!r}")

        if "A" <= ch <= "Z":
            value = self._shift(ord(ch) - self.UPPER_BASE)
            if self._options.force_case == ForceCase.TO_LOWER:
                return chr(self.LOWER_BASE + value)
            return chr(self.UPPER_BASE + value)

        if "a" <= ch <= "z":
            value = self._shift(ord(ch) - self.LOWER_BASE)
            if self._options.force_case == ForceCase.TO_UPPER:
                return chr(self.UPPER_BASE + value)
            return chr(self.LOWER_BASE + value)

        if self._options.non_letter_mode == NonLetterMode.SKIP:
            return None
        return ch

    def _shift(self, value: int) -> int:
        """Apply the current key shift to a letter value and advance the cursor."""
        shift = self._schedule[self._cursor]
        self._cursor = (self._cursor + 1) % len(self._schedule)
        self._letters += 1
        if self._mode is Mode.ENCRYPT:
            return (value + shift) % self.ALPHABET_SIZE
        return (self.ALPHABET_SIZE + value - shift) % self.ALPHABET_SIZE

    def __repr__(self):
        return (f"VigenereStream({self._mode.value}, key_len={len(self._schedule)}, "
                f"cursor={self._cursor})")


def _resolve_options(options: Optional[StreamOptions],
                     force_case: Optional[ForceCase],
                     non_letter_mode: Optional[NonLetterMode]) -> StreamOptions:
    if options is None:
        options = DEFAULT_OPTIONS
    if force_case is None and non_letter_mode is None:
        return options
    return StreamOptions(
        force_case=force_case if force_case is not None else options.force_case,
        non_letter_mode=(non_letter_mode if non_letter_mode is not None
                         else options.non_letter_mode),
    )


def encrypt_stream(source: Iterable[str], key: str,
                   options: Optional[StreamOptions] = None, *,
                   force_case: Optional[ForceCase] = None,
                   non_letter_mode: Optional[NonLetterMode] = None) -> VigenereStream:
    """
    Lazily encrypt `source` with `key`.

    Keyword overrides take precedence over the matching `options` field.
    Raises InvalidKeyError immediately for a bad key.
    """
    opts = _resolve_options(options, force_case, non_letter_mode)
    return VigenereStream(source, key, Mode.ENCRYPT, opts)


def decrypt_stream(source: Iterable[str], key: str,
                   options: Optional[StreamOptions] = None, *,
                   force_case: Optional[ForceCase] = None,
                   non_letter_mode: Optional[NonLetterMode] = None) -> VigenereStream:
    """Lazily decrypt `source` with `key`. See encrypt_stream()."""
    opts = _resolve_options(options, force_case, non_letter_mode)
    return VigenereStream(source, key, Mode.DECRYPT, opts)
