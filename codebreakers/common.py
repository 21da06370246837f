"""
Common operations
=================
Input normalization shared by every cipher and analyzer, and the
5-letter block layout used when printing results.

Normalized text is a plain str holding only the letters A-Z:
whitespace, punctuation, digits and non-ASCII characters are dropped,
everything else is uppercased.
"""

import logging
import string
from typing import Iterable, Union

from .errors import InvalidKey

logger = logging.getLogger(__name__)

ALPHA           = string.ascii_uppercase
GROUP_SIZE      = 5    # letters per block
GROUPS_PER_LINE = 5    # blocks per line

_LETTERS = frozenset(string.ascii_letters)


def normalize(raw: Union[str, bytes, bytearray]) -> str:
    """
    Strip everything but ASCII letters and uppercase the rest.

    Bytes are read as Latin-1, so any byte value is accepted.
    Never fails; returns "" when the input holds no letters.
    """
    if isinstance(raw, (bytes, bytearray)):
        raw = bytes(raw).decode("latin-1")
    return "".join(ch.upper() for ch in raw if ch in _LETTERS)


def normalize_key(raw: Union[str, bytes, bytearray]) -> str:
    """Normalize a key, raising InvalidKey if no letters are left."""
    key = normalize(raw)
    if not key:
        raise InvalidKey("Key must contain at least one letter.")
    return key


def to_numbers(text: str) -> list:
    """A=0 ... Z=25 for each letter of normalized text."""
    return [ord(ch) - 65 for ch in text]


def to_letters(numbers: Iterable[int]) -> str:
    return "".join(ALPHA[n % 26] for n in numbers)


def format_output(letters: str, group_size: int = GROUP_SIZE,
                  groups_per_line: int = GROUPS_PER_LINE) -> str:
    """
    Lay letters out in blocks for display.

    "ABCDEFGHIJKL" -> "ABCDE FGHIJ KL"; a new line starts every
    `groups_per_line` blocks.
    """
    if group_size < 1 or groups_per_line < 1:
        raise ValueError("group_size and groups_per_line must be positive.")
    groups = [letters[i:i + group_size]
              for i in range(0, len(letters), group_size)]
    lines = [" ".join(groups[i:i + groups_per_line])
             for i in range(0, len(groups), groups_per_line)]
    return "\n".join(lines)
