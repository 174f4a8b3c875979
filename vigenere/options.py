"""
Mode and policy flags for the Vigenère stream transform.

Defaults:
    force_case      = ForceCase.KEEP       (letters keep their input case)
    non_letter_mode = NonLetterMode.KEEP   (punctuation, digits, spaces pass through)
"""

from dataclasses import dataclass
from enum import Enum


class Mode(Enum):
    """Direction of the transform."""
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


class ForceCase(Enum):
    """Casing of transformed letters."""
    KEEP     = "keep"
    TO_LOWER = "lower"
    TO_UPPER = "upper"


class NonLetterMode(Enum):
    """What happens to characters outside A-Z / a-z."""
    KEEP = "keep"
    SKIP = "skip"


@dataclass(frozen=True)
class StreamOptions:
    """
    Configuration for a VigenereStream.

    Case policy only changes how a result is rendered. It never changes
    which shift is used or when the key cursor moves.
    """
    force_case:      ForceCase     = ForceCase.KEEP
    non_letter_mode: NonLetterMode = NonLetterMode.KEEP


DEFAULT_OPTIONS = StreamOptions()
