"""IUPAC symbol alphabets.

Each code's value is its canonical one-byte ASCII symbol, so a decoded
sequence can be stored as plain bytes.
"""

from __future__ import annotations

import enum

from Bio.Data.IUPACData import ambiguous_dna_values, protein_letters_1to3_extended

from fastakit.exceptions import InvalidSymbolError


class NucleicAcidCode(enum.StrEnum):
    A = "A"
    C = "C"
    G = "G"
    T = "T"
    U = "U"
    N = "N"
    K = "K"
    S = "S"
    Y = "Y"
    M = "M"
    W = "W"
    R = "R"
    B = "B"
    D = "D"
    H = "H"
    V = "V"
    GAP = "-"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str) and len(value) == 1:
            return cls._value2member_map_.get(value.upper())
        return None

    @classmethod
    def from_symbol(cls, symbol: str) -> NucleicAcidCode:
        """Look up a code by symbol, ignoring case."""
        try:
            return cls(symbol)
        except ValueError:
            raise InvalidSymbolError(symbol, 0) from None

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def bases(self) -> frozenset[NucleicAcidCode]:
        """Unambiguous bases this code stands for."""
        if self is NucleicAcidCode.GAP:
            return frozenset()
        if self is NucleicAcidCode.U:
            return frozenset({self})
        return frozenset(NucleicAcidCode(b) for b in ambiguous_dna_values[self.value])

    @property
    def is_ambiguous(self) -> bool:
        return len(self.bases) > 1

    @property
    def description(self) -> str:
        return _NUCLEIC_DESCRIPTIONS[self]


_NUCLEIC_DESCRIPTIONS = {
    NucleicAcidCode.A: "adenosine",
    NucleicAcidCode.C: "cytidine",
    NucleicAcidCode.G: "guanine",
    NucleicAcidCode.T: "thymidine",
    NucleicAcidCode.U: "uridine",
    NucleicAcidCode.N: "any",
    NucleicAcidCode.K: "keto",
    NucleicAcidCode.S: "strong",
    NucleicAcidCode.Y: "pyrimidine",
    NucleicAcidCode.M: "amino",
    NucleicAcidCode.W: "weak",
    NucleicAcidCode.R: "purine",
    NucleicAcidCode.B: "not A",
    NucleicAcidCode.D: "not C",
    NucleicAcidCode.H: "not G",
    NucleicAcidCode.V: "not T",
    NucleicAcidCode.GAP: "gap of indeterminate length",
}


class AminoAcidCode(enum.StrEnum):
    """IUPAC amino-acid codes.

    Nothing decodes into this alphabet yet; codon translation is not
    implemented.
    """
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"
    H = "H"
    I = "I"  # noqa: E741
    K = "K"
    L = "L"
    M = "M"
    N = "N"
    P = "P"
    Q = "Q"
    R = "R"
    S = "S"
    T = "T"
    U = "U"
    V = "V"
    W = "W"
    X = "X"
    Y = "Y"
    Z = "Z"
    STOP = "*"
    GAP = "-"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def three_letter(self) -> str:
        """Three-letter residue abbreviation, empty for stop and gap."""
        return protein_letters_1to3_extended.get(self.value, "")
