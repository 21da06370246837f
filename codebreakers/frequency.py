"""
Frequency Analysis
==================
From David Kahn's "The Codebreakers":

    Cryptanalysis rests upon the fact that the letters of language
    have "personalities" of their own. Though in a cryptogram they
    wear disguises, the cryptanalyst observes their actions and
    idiosyncrasies, and infers their identity from these traits.

Single-letter counts expose simple substitution; digram counts
(overlapping pairs of adjacent letters) expose the pairings, like TH
and HE in English, that survive it.

Renderers turn the tables into console histograms, or a PNG bar chart.

Dependencies: Pillow >= 10.0 (PNG chart only)
"""

import io
import logging
from collections import Counter

from PIL import Image, ImageDraw

from .common import ALPHA, normalize

logger = logging.getLogger(__name__)


def letter_frequency(text) -> dict:
    """Count of every letter A-Z in `text`; unseen letters count 0."""
    counts = Counter(normalize(text))
    return {letter: counts[letter] for letter in ALPHA}


def digram_frequency(text) -> Counter:
    """
    Count of every overlapping pair of adjacent letters.

    "AAA" -> {"AA": 2}. Only observed pairs are stored; a Counter
    reads 0 for the rest.
    """
    text = normalize(text)
    counts = Counter(a + b for a, b in zip(text, text[1:]))
    logger.debug(f"Digrams: {len(text)} letters, {len(counts)} distinct pairs")
    return counts


# ── renderers ────────────────────────────────────────────────────────────────

def render_letter_histogram(table: dict, bar: str = "|") -> str:
    """One line per letter: "E ||||||"."""
    return "\n".join(f"{letter} {bar * table.get(letter, 0)}"
                     for letter in ALPHA)


def render_digram_table(table) -> str:
    """26 x 26 grid of "AB( 2)" cells; zero counts are left blank."""
    lines = []
    for left in ALPHA:
        cells = []
        for right in ALPHA:
            count = table.get(left + right, 0)
            cells.append(f"{left}{right}({count:2})" if count
                         else f"{left}{right}(  )")
        lines.append("  ".join(cells))
    return "\n".join(lines)


def render_histogram_png(table: dict, bar_width: int = 16,
                         height: int = 200) -> bytes:
    """
    Draw a letter FrequencyTable as a bar chart.

    Bars are scaled to the largest count; an all-zero table gives an
    empty chart. Returns PNG bytes.
    """
    if bar_width < 3 or height < 20:
        raise ValueError("Chart too small: bar_width >= 3, height >= 20.")

    label_h = 14
    top     = max(table.values(), default=0)
    img     = Image.new("RGB", (bar_width * len(ALPHA), height + label_h), "white")
    draw    = ImageDraw.Draw(img)

    for i, letter in enumerate(ALPHA):
        x0 = i * bar_width
        count = table.get(letter, 0)
        if top and count:
            bar_h = max(1, round(count * (height - 2) / top))
            draw.rectangle([x0 + 1, height - bar_h, x0 + bar_width - 2, height - 1],
                           fill="black")
        draw.text((x0 + bar_width // 4, height + 1), letter, fill="black")

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    logger.debug(f"Histogram PNG: {img.size[0]}x{img.size[1]}, max count {top}")
    return buf.getvalue()
