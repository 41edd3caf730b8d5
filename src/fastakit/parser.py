"""FASTA line parser -- pure functions, no I/O.

A FASTA record is a description line starting with ``>`` followed by one or
more lines of IUPAC nucleotide symbols. Callers split input into lines; this
module classifies a single line and either extracts its description or
decodes its symbols.
"""

from __future__ import annotations

import enum
import re

from fastakit.alphabet import NucleicAcidCode
from fastakit.exceptions import FormatError, InvalidSymbolError
from fastakit.sequence import Sequence

_LINE_END = re.compile(r"[\r\n]")
_LINE_END_BYTES = re.compile(rb"[\r\n]")


def _build_decode_table() -> bytes:
    # 0 marks a byte outside the alphabet
    table = bytearray(256)
    for code in NucleicAcidCode:
        table[ord(code.value)] = ord(code.value)
        table[ord(code.value.lower())] = ord(code.value)
    return bytes(table)


_DECODE_TABLE = _build_decode_table()


class LineKind(enum.StrEnum):
    DESCRIPTION = "description"
    SEQUENCE = "sequence"
    BLANK = "blank"


def _as_bytes(line) -> bytes:
    return line if isinstance(line, bytes) else bytes(line)


def extract_description(line: str | bytes) -> str | bytes:
    """Return the text after the ``>`` marker, up to the first line terminator.

    The result is ``str`` for ``str`` input and ``bytes`` for any byte-like
    input. A trailing terminator is not required.

    Raises:
        FormatError: if the line does not start with ``>``.
    """
    if isinstance(line, str):
        if not line.startswith(">"):
            raise FormatError("not a description line")
        return _LINE_END.split(line[1:], maxsplit=1)[0]

    data = _as_bytes(line)
    if not data.startswith(b">"):
        raise FormatError("not a description line")
    return _LINE_END_BYTES.split(data[1:], maxsplit=1)[0]


def split_description(description: str) -> tuple[str, str]:
    """Split a description into its identifier and the trailing comment."""
    parts = description.split(None, 1)
    if not parts:
        return "", ""
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1].strip()


def decode_sequence(line: str | bytes) -> Sequence:
    """Decode one line of nucleotide symbols, case-insensitively.

    Every symbol maps to exactly one code, so the output has the input's
    length. Decoding is all-or-nothing.

    Raises:
        InvalidSymbolError: for the first symbol outside the alphabet, with
            its zero-based position. For byte input, positions are byte
            offsets and the symbol is the offending byte read as Latin-1.
    """
    if isinstance(line, str):
        # one "?" per unencodable character keeps positions aligned
        data = line.encode("ascii", errors="replace")
    else:
        data = _as_bytes(line)

    decoded = data.translate(_DECODE_TABLE)
    position = decoded.find(0)
    if position != -1:
        if isinstance(line, str):
            symbol = line[position]
        else:
            symbol = chr(data[position])
        raise InvalidSymbolError(symbol, position)
    return Sequence._from_bytes(decoded)


def classify_line(line: str | bytes) -> LineKind:
    """Tell whether a line is a description, sequence data, or blank."""
    if isinstance(line, str):
        marker = ">"
    else:
        line = _as_bytes(line)
        marker = b">"

    if line.startswith(marker):
        return LineKind.DESCRIPTION
    if not line.strip():
        return LineKind.BLANK
    return LineKind.SEQUENCE


def parse_line(line: str | bytes) -> str | bytes | Sequence | None:
    """Route a line to the description extractor or the sequence decoder.

    Blank lines yield None.
    """
    kind = classify_line(line)
    if kind is LineKind.DESCRIPTION:
        return extract_description(line)
    if kind is LineKind.SEQUENCE:
        return decode_sequence(line)
    return None
