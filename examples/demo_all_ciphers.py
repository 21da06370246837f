"""
codebreakers — Live Demo: Vigenère, Transposition, Frequency Analysis
====================================================================
Run:  python examples/demo_all_ciphers.py

Shows every cipher enciphering and deciphering a real message,
then the letter and digram counts that give them away.
"""

import sys, os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from codebreakers.common                import normalize, format_output
from codebreakers.ciphers.vigenere      import VigenereCipher
from codebreakers.ciphers.transposition import TranspositionCipher, column_ranks
from codebreakers.frequency             import (letter_frequency, digram_frequency,
                                                render_letter_histogram)

LINE = "═" * 70
MSG  = "In an obscure corner of the Scythian steppe, a shepherd found the key."

def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

# ─────────────────────────────────────────────────────────────────────────────
print(f"\n{LINE}")
print("  codebreakers — Classical Cipher Demo")
print(LINE)
print(f"  Message: {MSG}")
print(f"  Normalized: {normalize(MSG)}\n")

# ── VIGENÈRE ─────────────────────────────────────────────────────────────────
header("Vigenère — standard")
v  = VigenereCipher("THISISMODERNWAR")
ct = v.encrypt(MSG)
ok("Key stream", v.keystream(20) + "...")
ok("Enciphered", format_output(ct, groups_per_line=8))
ok("Deciphered", format_output(v.decrypt(ct), groups_per_line=8))

header("Vigenère — autokey")
a  = VigenereCipher("QUEENLY", autokey=True)
ct = a.encrypt(MSG)
ok("Enciphered", format_output(ct, groups_per_line=8))
ok("Deciphered", format_output(a.decrypt(ct), groups_per_line=8))

# ── TRANSPOSITION ────────────────────────────────────────────────────────────
header("Columnar transposition")
t  = TranspositionCipher("ZEBRAS")
ct = t.encrypt(MSG)
ok("Column ranks", " ".join(str(r) for r in column_ranks(t.key)))
ok("Enciphered",   format_output(ct, groups_per_line=8))
ok("Deciphered",   format_output(t.decrypt(ct), groups_per_line=8))

# ── FREQUENCY ────────────────────────────────────────────────────────────────
header("Frequency analysis")
print(render_letter_histogram(letter_frequency(MSG)))
top = digram_frequency(MSG).most_common(5)
ok("Top digrams", ", ".join(f"{pair}={n}" for pair, n in top))

print(f"\n{LINE}\n")
