"""
codebreakers — Command Line Tests
=================================
Run with:  python -m pytest tests/ -v
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import io

import pytest
from PIL import Image

from codebreakers.cli import main


@pytest.fixture
def message(tmp_path):
    path = tmp_path / "message.txt"
    path.write_text("Now is the time\nfor all good men.\n")
    return str(path)


def _stdin(monkeypatch, data: bytes):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data)))


# ── Vigenère ──────────────────────────────────────────────────────────────────
def test_cli_vigenere_encipher_file(message, capsys):
    assert main(["vigenere", "encipher", "-k", "TYPE", message]) == 0
    assert capsys.readouterr().out == "GMLML RWIMG BIYMG EEJVS HBBIG\n"

def test_cli_vigenere_decipher_stdin(monkeypatch, capsys):
    _stdin(monkeypatch, b"GMLML RWIMG BIYMG EEJVS HBBIG")
    assert main(["vigenere", "decipher", "-k", "TYPE"]) == 0
    assert capsys.readouterr().out == "NOWIS THETI MEFOR ALLGO ODMEN\n"

def test_cli_vigenere_autokey(monkeypatch, capsys):
    _stdin(monkeypatch, b"aaaaaa")
    assert main(["vigenere", "encipher", "-k", "ZZZ", "--autokey", "-"]) == 0
    assert capsys.readouterr().out == "ZZZAA A\n"

def test_cli_group_size(message, capsys):
    assert main(["vigenere", "encipher", "-k", "A", "--group-size", "4", message]) == 0
    assert capsys.readouterr().out.startswith("NOWI STHE TIME")

def test_cli_invalid_key(message, capsys):
    assert main(["vigenere", "encipher", "-k", "1234", message]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("error:")


# ── Transposition ────────────────────────────────────────────────────────────
def test_cli_transposition_roundtrip(monkeypatch, capsys):
    _stdin(monkeypatch, b"We are discovered. Flee at once")
    assert main(["transposition", "encipher", "-k", "ZEBRAS"]) == 0
    assert capsys.readouterr().out == "EVLNA CDTES EAROF ODEEC WIREE\n"

    _stdin(monkeypatch, b"EVLNA CDTES EAROF ODEEC WIREE")
    assert main(["transposition", "decipher", "-k", "ZEBRAS"]) == 0
    assert capsys.readouterr().out == "WEARE DISCO VERED FLEEA TONCE\n"

def test_cli_transposition_padded_mismatch(monkeypatch, capsys):
    _stdin(monkeypatch, b"CATTTANADAKW")
    assert main(["transposition", "decipher", "-k", "ZEBRA", "--pad"]) == 1
    assert "error:" in capsys.readouterr().err

def test_cli_transposition_bad_filler(monkeypatch, capsys):
    _stdin(monkeypatch, b"ATTACK")
    assert main(["transposition", "encipher", "-k", "ZEBRA", "--pad", "--filler", "7"]) == 1
    assert "error:" in capsys.readouterr().err

def test_cli_transposition_bad_filler_on_full_grid(monkeypatch, capsys):
    _stdin(monkeypatch, b"ATTACKATDA")
    assert main(["transposition", "encipher", "-k", "ZEBRA", "--pad", "--filler", "7"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "error:" in captured.err


# ── Frequency ────────────────────────────────────────────────────────────────
def test_cli_letter_frequency(monkeypatch, capsys):
    _stdin(monkeypatch, b"AAABBC")
    assert main(["frequency", "letters"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[:3] == ["A |||", "B ||", "C |"]

def test_cli_letter_frequency_png(message, tmp_path, capsys):
    out = tmp_path / "hist.png"
    assert main(["frequency", "letters", "--png", str(out), message]) == 0
    assert Image.open(out).size == (16 * 26, 214)

def test_cli_digram_frequency(monkeypatch, capsys):
    _stdin(monkeypatch, b"But there wasn't any water in the wishing well")
    assert main(["frequency", "digrams"]) == 0
    assert "IN( 2)" in capsys.readouterr().out

def test_cli_png_requires_letters(capsys):
    with pytest.raises(SystemExit):
        main(["frequency", "digrams", "--png", "out.png"])

def test_cli_file_after_options(message, capsys):
    assert main(["vigenere", "encipher", "--group-size", "5", "-k", "A", message]) == 0
    assert capsys.readouterr().out.startswith("NOWIS THETI")
    assert main(["transposition", "decipher", "--pad", "-k", "ZEBRAS", message]) == 1
    assert "error:" in capsys.readouterr().err

def test_cli_missing_file(tmp_path, capsys):
    assert main(["frequency", "letters", str(tmp_path / "nope.txt")]) == 1
    assert "error:" in capsys.readouterr().err
