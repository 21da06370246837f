from .vigenere      import VigenereCipher, vigenere_encipher, vigenere_decipher
from .transposition import (TranspositionCipher, transposition_encipher,
                            transposition_decipher, column_order, column_ranks)
