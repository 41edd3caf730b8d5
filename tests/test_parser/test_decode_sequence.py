"""Tests for the nucleotide sequence decoder."""

import pytest

from fastakit.alphabet import NucleicAcidCode as NA
from fastakit.exceptions import InvalidSymbolError
from fastakit.parser import decode_sequence
from fastakit.sequence import Sequence

SYMBOLS = [
    ("A", NA.A), ("C", NA.C), ("G", NA.G), ("T", NA.T), ("U", NA.U),
    ("N", NA.N), ("K", NA.K), ("S", NA.S), ("Y", NA.Y), ("M", NA.M),
    ("W", NA.W), ("R", NA.R), ("B", NA.B), ("D", NA.D), ("H", NA.H),
    ("V", NA.V), ("-", NA.GAP),
]


@pytest.mark.parametrize("symbol,code", SYMBOLS)
def test_decode_single_symbol(symbol, code):
    assert decode_sequence(symbol) == [code]
    assert decode_sequence(symbol.lower()) == [code]


@pytest.mark.parametrize("symbol,code", SYMBOLS)
def test_decode_single_byte(symbol, code):
    assert decode_sequence(symbol.encode()) == [code]


def test_decode_preserves_order_and_length():
    seq = decode_sequence("ACTG")
    assert isinstance(seq, Sequence)
    assert len(seq) == 4
    assert list(seq) == [NA.A, NA.C, NA.T, NA.G]


def test_decode_case_insensitive():
    assert decode_sequence("actg") == decode_sequence("ACTG")
    assert decode_sequence("aCtG") == [NA.A, NA.C, NA.T, NA.G]


def test_decode_gap():
    assert decode_sequence("A-G") == [NA.A, NA.GAP, NA.G]


def test_decode_invalid_symbol():
    with pytest.raises(InvalidSymbolError) as excinfo:
        decode_sequence("ACXG")
    assert excinfo.value.position == 2
    assert excinfo.value.symbol == "X"
    assert "'X'" in str(excinfo.value)
    assert "position 2" in str(excinfo.value)


def test_decode_reports_first_invalid_symbol():
    with pytest.raises(InvalidSymbolError) as excinfo:
        decode_sequence("AC.G*")
    assert excinfo.value.position == 2
    assert excinfo.value.symbol == "."


def test_decode_invalid_byte():
    with pytest.raises(InvalidSymbolError) as excinfo:
        decode_sequence(b"ACGT\x00")
    assert excinfo.value.position == 4
    assert excinfo.value.symbol == "\x00"


def test_decode_non_ascii_character():
    with pytest.raises(InvalidSymbolError) as excinfo:
        decode_sequence("ACGé")
    assert excinfo.value.position == 3
    assert excinfo.value.symbol == "é"


def test_decode_rejects_line_terminator():
    with pytest.raises(InvalidSymbolError) as excinfo:
        decode_sequence("ACGT\n")
    assert excinfo.value.position == 4


def test_decode_rejects_whitespace():
    with pytest.raises(InvalidSymbolError) as excinfo:
        decode_sequence("AC GT")
    assert excinfo.value.position == 2
    assert excinfo.value.symbol == " "


def test_decode_empty_line():
    seq = decode_sequence("")
    assert len(seq) == 0
    assert seq == []


def test_decode_is_repeatable():
    line = "GATTACA-rykmswbdhvn"
    assert decode_sequence(line) == decode_sequence(line)


def test_decode_does_not_alias_input():
    buf = bytearray(b"ACGT")
    seq = decode_sequence(buf)
    buf[0] = ord("T")
    assert seq == [NA.A, NA.C, NA.G, NA.T]


def test_decode_memoryview():
    assert decode_sequence(memoryview(b"acgt")) == [NA.A, NA.C, NA.G, NA.T]


def test_decode_bytes_reports_latin1_symbol_at_byte_offset():
    with pytest.raises(InvalidSymbolError) as excinfo:
        decode_sequence("ACé".encode("utf-8"))
    assert excinfo.value.position == 2
    assert excinfo.value.symbol == "\xc3"
