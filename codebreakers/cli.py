"""
codebreakers command line
=========================
Run:  codebreakers vigenere encipher -k LEMON message.txt
      echo "attack at dawn" | codebreakers transposition encipher -k CAB
      codebreakers frequency letters --png hist.png message.txt

Input comes from FILE, or standard input when FILE is omitted or "-".
Cipher output is printed in 5-letter blocks.
"""

import argparse
import logging
import sys

from .                      import __version__
from .common                import GROUP_SIZE, format_output
from .ciphers.vigenere      import vigenere_encipher, vigenere_decipher
from .ciphers.transposition import transposition_encipher, transposition_decipher
from .frequency             import (letter_frequency, digram_frequency,
                                    render_letter_histogram, render_digram_table,
                                    render_histogram_png)

logger = logging.getLogger(__name__)


def _read_input(path: str) -> bytes:
    if path in (None, "-"):
        return sys.stdin.buffer.read()
    with open(path, "rb") as f:
        return f.read()


def _run_vigenere(args, data: bytes) -> str:
    fn = vigenere_encipher if args.direction == "encipher" else vigenere_decipher
    return format_output(fn(data, args.key, autokey=args.autokey), args.group_size)


def _run_transposition(args, data: bytes) -> str:
    if args.direction == "encipher":
        out = transposition_encipher(data, args.key, pad=args.pad, filler=args.filler)
    else:
        out = transposition_decipher(data, args.key, padded=args.pad)
    return format_output(out, args.group_size)


def _run_frequency(args, data: bytes) -> str:
    if args.table == "digrams":
        return render_digram_table(digram_frequency(data))
    table = letter_frequency(data)
    if args.png:
        with open(args.png, "wb") as f:
            f.write(render_histogram_png(table))
        logger.info(f"Histogram written to {args.png}")
    return render_letter_histogram(table)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="codebreakers",
        description="Classical ciphers and frequency analysis.",
    )
    parser.add_argument("--version", action="version",
                        version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log debug details to stderr")
    sub = parser.add_subparsers(dest="command", required=True)

    # Each leaf command owns its options and FILE, so a path may follow them.
    def add_cipher(name, run, help_text):
        leaves = []
        directions = sub.add_parser(name, help=help_text).add_subparsers(
            dest="direction", required=True)
        for direction in ("encipher", "decipher"):
            p = directions.add_parser(direction)
            p.add_argument("-k", "--key", required=True)
            p.add_argument("--group-size", type=int, default=GROUP_SIZE,
                           help="letters per output block (default: %(default)s)")
            p.add_argument("file", nargs="?", default="-")
            p.set_defaults(run=run)
            leaves.append(p)
        return leaves

    for p in add_cipher("vigenere", _run_vigenere, "Vigenère cipher"):
        p.add_argument("--autokey", action="store_true",
                       help="extend the key with the message itself")

    enc, dec = add_cipher("transposition", _run_transposition,
                          "columnar transposition cipher")
    enc.add_argument("--pad", action="store_true",
                     help="fill the last row with the filler letter")
    enc.add_argument("--filler", default="X",
                     help="padding letter (default: %(default)s)")
    dec.add_argument("--pad", action="store_true",
                     help="expect a complete grid")

    tables = sub.add_parser("frequency", help="letter or digram frequency counts") \
                .add_subparsers(dest="table", required=True)
    letters = tables.add_parser("letters")
    letters.add_argument("--png", metavar="OUT", help="also write a bar chart PNG")
    digrams = tables.add_parser("digrams")
    for p in (letters, digrams):
        p.add_argument("file", nargs="?", default="-")
        p.set_defaults(run=_run_frequency)
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        data = _read_input(args.file)
        output = args.run(args, data)
    except (ValueError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(output)
    return 0
