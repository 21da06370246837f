"""
Vigenère Polyalphabetic Cipher
==============================
Standard and autokey variants.

If P is the plain text, C the cipher text and K the key, then
enciphering is C = P + K and deciphering is P = C - K, letter by
letter, with A=0 ... Z=25 and arithmetic mod 26.

Standard: the key repeats for as long as the message runs.

Autokey: both parties agree on a priming key K0 and the message
itself extends it, K = K0 || MESSAGE. The key never repeats, so
Kasiski analysis finds no period. Deciphering has to recover the
plain text left to right, because each recovered letter becomes key
material len(K0) positions later.

Historical note: Blaise de Vigenère, 1586. Called "le chiffre
indéchiffrable" for 300 years. Broken by Babbage and Kasiski.
Not secure by any modern standard.
"""

import logging

from ..common import ALPHA, normalize, normalize_key, to_letters, to_numbers

logger = logging.getLogger(__name__)


def vigenere_encipher(plaintext, key, autokey: bool = False) -> str:
    """Encipher `plaintext` under `key`. Raises InvalidKey on an empty key."""
    shifts = to_numbers(normalize_key(key))
    plain  = to_numbers(normalize(plaintext))
    logger.debug(f"Vigenère encipher: {len(plain)} letters, "
                 f"key={len(shifts)} autokey={autokey}")

    if autokey:
        stream = (shifts + plain)[:len(plain)]
    else:
        stream = [shifts[i % len(shifts)] for i in range(len(plain))]
    return to_letters(p + k for p, k in zip(plain, stream))


def vigenere_decipher(ciphertext, key, autokey: bool = False) -> str:
    """Decipher `ciphertext` under `key`. Raises InvalidKey on an empty key."""
    shifts = to_numbers(normalize_key(key))
    cipher = to_numbers(normalize(ciphertext))
    logger.debug(f"Vigenère decipher: {len(cipher)} letters, "
                 f"key={len(shifts)} autokey={autokey}")

    if not autokey:
        return to_letters(c - shifts[i % len(shifts)]
                          for i, c in enumerate(cipher))

    # Recovered letters extend the stream as we go.
    stream = list(shifts)
    plain  = []
    for i, c in enumerate(cipher):
        p = (c - stream[i]) % 26
        plain.append(p)
        stream.append(p)
    return to_letters(plain)


class VigenereCipher:
    """
    Vigenère cipher bound to one key.

    The key is validated once, at construction.
    """

    ALPHA = ALPHA

    def __init__(self, key: str, autokey: bool = False):
        self._key    = normalize_key(key)
        self.autokey = autokey

    @property
    def key(self) -> str:
        return self._key

    def keystream(self, length: int, plaintext="") -> str:
        """
        First `length` letters of the key stream.

        Autokey streams continue with the message, so `plaintext` must
        supply enough letters; ValueError otherwise.
        """
        if self.autokey:
            stream = self._key + normalize(plaintext)
            if len(stream) < length:
                raise ValueError(
                    f"Autokey stream needs {length - len(self._key)} plain text "
                    f"letters, got {len(stream) - len(self._key)}."
                )
            return stream[:length]
        reps = -(-length // len(self._key))
        return (self._key * reps)[:length]

    def encrypt(self, plaintext) -> str:
        return vigenere_encipher(plaintext, self._key, self.autokey)

    def decrypt(self, ciphertext) -> str:
        return vigenere_decipher(ciphertext, self._key, self.autokey)

    def __repr__(self):
        mode = "autokey" if self.autokey else "standard"
        return f"VigenereCipher(key={self._key!r}, {mode})"
