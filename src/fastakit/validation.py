"""Line-by-line FASTA validation on top of the parser.

Every line is routed through the description extractor or the sequence
decoder; validation stops at the first error and reports it with its line
number.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Literal

from pydantic import BaseModel

from fastakit.config import config
from fastakit.exceptions import FastaFileNotFoundError, FormatError, InvalidSymbolError
from fastakit.parser import LineKind, classify_line, decode_sequence, extract_description

logger = logging.getLogger(__name__)


class ValidationIssue(BaseModel):
    """First problem found in a FASTA input."""
    line_number: int  # 1-based; 0 when the input has no lines
    column: int | None = None
    kind: Literal["format", "invalid_symbol"]
    message: str
    symbol: str | None = None


class ValidationReport(BaseModel):
    source: str = ""
    valid: bool = True
    records: int = 0
    sequence_lines: int = 0
    symbols: int = 0
    error: ValidationIssue | None = None


def _strip_terminator(line):
    if isinstance(line, str):
        return line.rstrip("\r\n")
    return bytes(line).rstrip(b"\r\n")


def validate_lines(
    lines: Iterable[str | bytes],
    *,
    allow_blank_lines: bool | None = None,
    require_sequence: bool | None = None,
    source: str = "",
) -> ValidationReport:
    """Validate FASTA lines and return a report of the first error, if any.

    Options left as None fall back to ``config.validation``.
    """
    if allow_blank_lines is None:
        allow_blank_lines = config.validation.allow_blank_lines
    if require_sequence is None:
        require_sequence = config.validation.require_sequence

    report = ValidationReport(source=source)
    # line number of the last description, while no sequence line has followed it
    pending_description: int | None = None

    def fail(line_number: int, exc: FormatError | InvalidSymbolError) -> ValidationReport:
        if isinstance(exc, InvalidSymbolError):
            issue = ValidationIssue(
                line_number=line_number,
                column=exc.position,
                kind="invalid_symbol",
                message=str(exc),
                symbol=exc.symbol,
            )
        else:
            issue = ValidationIssue(line_number=line_number, kind="format", message=str(exc))
        report.valid = False
        report.error = issue
        logger.info("Invalid FASTA %s at line %d: %s", source or "input", line_number, issue.message)
        return report

    for line_number, raw in enumerate(lines, start=1):
        line = _strip_terminator(raw)
        kind = classify_line(line)

        if kind is LineKind.BLANK:
            if not allow_blank_lines:
                return fail(line_number, FormatError("blank line"))
            continue

        if kind is LineKind.DESCRIPTION:
            if require_sequence and pending_description is not None:
                return fail(pending_description, FormatError("record has no sequence lines"))
            description = extract_description(line)
            logger.debug("Record %d at line %d: %r", report.records + 1, line_number, description)
            report.records += 1
            pending_description = line_number
            continue

        if report.records == 0:
            return fail(line_number, FormatError("sequence data before first description line"))
        try:
            sequence = decode_sequence(line)
        except InvalidSymbolError as exc:
            return fail(line_number, exc)
        report.sequence_lines += 1
        report.symbols += len(sequence)
        pending_description = None

    if report.records == 0:
        return fail(0, FormatError("no records found"))
    if require_sequence and pending_description is not None:
        return fail(pending_description, FormatError("record has no sequence lines"))

    logger.info(
        "Validated %s: %d records, %d symbols",
        source or "input", report.records, report.symbols,
    )
    return report


def validate_file(
    path: Path | str,
    *,
    allow_blank_lines: bool | None = None,
    require_sequence: bool | None = None,
) -> ValidationReport:
    """Validate a FASTA file line by line."""
    path = Path(path)
    if not path.exists():
        raise FastaFileNotFoundError(f"FASTA file not found: {path}")
    if not path.is_file():
        raise FastaFileNotFoundError(f"FASTA path is not a file: {path}")

    with open(path, "rb") as f:
        return validate_lines(
            f,
            allow_blank_lines=allow_blank_lines,
            require_sequence=require_sequence,
            source=str(path),
        )
