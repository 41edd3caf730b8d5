"""Tests for description line extraction."""

import pytest

from fastakit.exceptions import FormatError
from fastakit.parser import extract_description, split_description


def test_extract_description():
    assert extract_description(">ERR001275.1198") == "ERR001275.1198"


def test_extract_description_with_spaces():
    assert extract_description(">abc 123") == "abc 123"


def test_extract_description_bytes():
    assert extract_description(b">abc 123") == b"abc 123"


def test_extract_description_stops_at_line_end():
    assert extract_description(">abc 123\nACGT") == "abc 123"
    assert extract_description(">abc\r\n") == "abc"
    assert extract_description(b">abc\r\n") == b"abc"


def test_extract_empty_description():
    assert extract_description(">") == ""


def test_extract_rejects_sequence_line():
    with pytest.raises(FormatError, match="not a description line"):
        extract_description("ACTG")


def test_extract_rejects_empty_line():
    with pytest.raises(FormatError):
        extract_description("")
    with pytest.raises(FormatError):
        extract_description(b"")


def test_extract_rejects_indented_marker():
    with pytest.raises(FormatError):
        extract_description(" >abc")


def test_split_description():
    assert split_description("ERR001275.1198 E. coli read") == ("ERR001275.1198", "E. coli read")


def test_split_description_identifier_only():
    assert split_description("ERR001275.1198") == ("ERR001275.1198", "")


def test_split_empty_description():
    assert split_description("") == ("", "")
