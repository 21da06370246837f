"""
codebreakers — Classical Cryptography
=====================================
Pen-and-paper ciphers and the analysis that broke them, after
David Kahn's "The Codebreakers".

Modules:
    common         — text normalization, 5-letter block output
    vigenere       — Vigenère polyalphabetic (standard and autokey)
    transposition  — Columnar transposition
    frequency      — Single-letter and digram frequency analysis

None of these offer any confidentiality by modern standards.

License: Apache 2.0
"""

__version__ = "1.0.0"

from .common                 import normalize, normalize_key, format_output
from .errors                 import CipherError, InvalidKey, LengthMismatch
from .ciphers.vigenere       import VigenereCipher, vigenere_encipher, vigenere_decipher
from .ciphers.transposition  import (TranspositionCipher, transposition_encipher,
                                     transposition_decipher)
from .frequency              import (letter_frequency, digram_frequency,
                                     render_letter_histogram, render_digram_table,
                                     render_histogram_png)

__all__ = [
    "normalize",
    "normalize_key",
    "format_output",
    "CipherError",
    "InvalidKey",
    "LengthMismatch",
    "VigenereCipher",
    "vigenere_encipher",
    "vigenere_decipher",
    "TranspositionCipher",
    "transposition_encipher",
    "transposition_decipher",
    "letter_frequency",
    "digram_frequency",
    "render_letter_histogram",
    "render_digram_table",
    "render_histogram_png",
]
