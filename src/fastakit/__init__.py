"""FASTA description extraction and IUPAC nucleotide decoding."""

from fastakit.alphabet import AminoAcidCode, NucleicAcidCode
from fastakit.exceptions import FastaError, FormatError, InvalidSymbolError
from fastakit.parser import (
    LineKind,
    classify_line,
    decode_sequence,
    extract_description,
    parse_line,
    split_description,
)
from fastakit.sequence import Sequence

__all__ = [
    "AminoAcidCode",
    "FastaError",
    "FormatError",
    "InvalidSymbolError",
    "LineKind",
    "NucleicAcidCode",
    "Sequence",
    "classify_line",
    "decode_sequence",
    "extract_description",
    "parse_line",
    "split_description",
]
