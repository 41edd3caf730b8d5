"""Decoded nucleotide sequence container."""

from __future__ import annotations

from collections import abc
from collections.abc import Iterable, Iterator

from fastakit.alphabet import NucleicAcidCode

_CODE_BY_BYTE = {ord(code.value): code for code in NucleicAcidCode}
_GC_BYTES = frozenset(b"GCS")
_AMBIGUOUS_BYTES = frozenset(ord(code.value) for code in NucleicAcidCode if code.is_ambiguous)


class Sequence(abc.Sequence):
    """Immutable sequence of NucleicAcidCode, stored one byte per element.

    Compares equal to another Sequence or to a list of codes.
    """

    __slots__ = ("_data",)

    def __init__(self, codes: Iterable[NucleicAcidCode | str] = ()):
        self._data = bytes(ord(NucleicAcidCode(c).value) for c in codes)

    @classmethod
    def _from_bytes(cls, data: bytes) -> Sequence:
        # data must already hold canonical symbols only
        seq = cls.__new__(cls)
        seq._data = data
        return seq

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Sequence._from_bytes(self._data[index])
        return _CODE_BY_BYTE[self._data[index]]

    def __iter__(self) -> Iterator[NucleicAcidCode]:
        return (_CODE_BY_BYTE[b] for b in self._data)

    def __contains__(self, code) -> bool:
        try:
            return ord(NucleicAcidCode(code).value) in self._data
        except (ValueError, TypeError):
            return False

    def __eq__(self, other) -> bool:
        if isinstance(other, Sequence):
            return self._data == other._data
        if isinstance(other, list):
            return len(other) == len(self) and all(a == b for a, b in zip(self, other))
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._data)

    def __bytes__(self) -> bytes:
        return self._data

    def __str__(self) -> str:
        return self._data.decode("ascii")

    def __repr__(self) -> str:
        return f"<Sequence {str(self)!r}>" if len(self) <= 40 else f"<Sequence {len(self)} codes>"

    @property
    def has_gaps(self) -> bool:
        return b"-" in self._data

    @property
    def has_ambiguity(self) -> bool:
        return any(b in _AMBIGUOUS_BYTES for b in self._data)

    def gc_fraction(self) -> float:
        """Fraction of non-gap positions that are G, C or S."""
        total = len(self._data) - self._data.count(b"-")
        if not total:
            return 0.0
        return sum(1 for b in self._data if b in _GC_BYTES) / total
