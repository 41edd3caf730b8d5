"""fastakit exceptions."""


class FastaError(Exception):
    """Base exception for fastakit."""


class FormatError(FastaError):
    """Raised when a line does not have the expected FASTA form."""


class InvalidSymbolError(FastaError):
    """Raised when a sequence symbol is outside the nucleotide alphabet."""

    def __init__(self, symbol: str, position: int):
        self.symbol = symbol
        self.position = position
        super().__init__(f"invalid symbol {symbol!r} at position {position}")

    def __reduce__(self):
        return type(self), (self.symbol, self.position)


class FastaFileNotFoundError(FastaError):
    """Raised when a FASTA file to validate does not exist."""
