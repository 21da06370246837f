"""
Errors raised by the cipher engines.

All of them are ValueError subclasses: a bad key or a malformed
ciphertext is a bad argument, nothing more.
"""


class CipherError(ValueError):
    """Base class for every error raised by codebreakers."""


class InvalidKey(CipherError):
    """The key contains no letters once normalized."""


class LengthMismatch(CipherError):
    """The ciphertext cannot fill the grid the key describes."""
