"""
Columnar Transposition Cipher
=============================
Write the message into as many columns as the key has letters,
re-arrange the columns in the alphabetical order of the key, then
read the cipher text out column by column.

Message "NO JUSTICE NO PEACE", key "CAB":

    C  A  B          A  B  C
    -------          -------
    N  O  J          O  J  N
    U  S  T          S  T  U
    I  C  E    ->    C  E  I
    N  O  P          O  P  N
    E  A  C          A  C  E
    E                      E

    Cipher text: OSCOA JTEPC NUINE E

Repeated key letters are counted off left to right, so "BAACDD"
orders its columns 2 0 1 3 4 5.

The last row is left short unless padding is asked for. Deciphering
rebuilds the column heights from the message length: every column is
len // width tall, and the leftmost len % width columns of the
written grid hold one extra letter.

Letters are moved, never changed, so single-letter frequencies of
the cipher text are those of the plain text.
"""

import logging

from ..common import normalize, normalize_key
from ..errors import LengthMismatch

logger = logging.getLogger(__name__)

FILLER = "X"


def column_order(key) -> list:
    """Column indices in read-out order: sorted by (letter, position)."""
    key = normalize_key(key)
    return sorted(range(len(key)), key=lambda col: (key[col], col))


def column_ranks(key) -> list:
    """
    Rank of each column in read-out order.

    "BACD" -> [1, 0, 2, 3]; "BAACDD" -> [2, 0, 1, 3, 4, 5]
    """
    order = column_order(key)
    ranks = [0] * len(order)
    for rank, col in enumerate(order):
        ranks[col] = rank
    return ranks


def _check_filler(filler: str) -> str:
    if len(filler) != 1 or normalize(filler) != filler.upper():
        raise ValueError("Filler must be a single letter.")
    return filler.upper()


def transposition_encipher(plaintext, key, pad: bool = False,
                           filler: str = FILLER) -> str:
    """
    Encipher `plaintext` under `key`.

    With pad=True the last row is completed with `filler`, which must
    be a single letter. Raises InvalidKey on an empty key.
    """
    order = column_order(key)
    width = len(order)
    text  = normalize(plaintext)
    if pad:
        filler = _check_filler(filler)
        text += filler * (-len(text) % width)
    logger.debug(f"Transposition encipher: {len(text)} letters, width={width}")

    return "".join(text[col::width] for col in order)


def transposition_decipher(ciphertext, key, padded: bool = False) -> str:
    """
    Decipher `ciphertext` under `key`.

    padded=True demands a complete grid and raises LengthMismatch
    otherwise. Filler letters are kept in the output.
    """
    order = column_order(key)
    width = len(order)
    text  = normalize(ciphertext)
    rows, remainder = divmod(len(text), width)
    if padded and remainder:
        raise LengthMismatch(
            f"Padded cipher text of {len(text)} letters does not fill "
            f"{width} columns."
        )
    logger.debug(f"Transposition decipher: {len(text)} letters, "
                 f"width={width}, full rows={rows}, tall columns={remainder}")

    columns = [""] * width
    cursor  = 0
    for col in order:
        height = rows + 1 if col < remainder else rows
        columns[col] = text[cursor:cursor + height]
        cursor += height

    plain = []
    for row in range(rows + 1):
        for column in columns:
            if row < len(column):
                plain.append(column[row])
    return "".join(plain)


class TranspositionCipher:
    """Columnar transposition bound to one key."""

    def __init__(self, key: str, pad: bool = False, filler: str = FILLER):
        self._key   = normalize_key(key)
        self.pad    = pad
        self.filler = _check_filler(filler)

    @property
    def key(self) -> str:
        return self._key

    @property
    def width(self) -> int:
        return len(self._key)

    def encrypt(self, plaintext) -> str:
        return transposition_encipher(plaintext, self._key, self.pad, self.filler)

    def decrypt(self, ciphertext) -> str:
        return transposition_decipher(ciphertext, self._key, padded=self.pad)

    def __repr__(self):
        return f"TranspositionCipher(key={self._key!r}, pad={self.pad})"
