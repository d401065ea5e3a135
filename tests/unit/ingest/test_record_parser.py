"""Unit tests for the enrollment row parser."""

from __future__ import annotations

import pytest

from core.types import EnrollmentRecord, RejectedRow
from ingest.record_parser import parse_enrollment_line, split_full_name


def test_parse_enrollment_line_builds_record() -> None:
    """A well-formed row should become a record with split names."""
    outcome = parse_enrollment_line("1,John Doe,3,Acme Insurance", 2)

    assert outcome == EnrollmentRecord("1", "John", "Doe", 3, "Acme Insurance")


def test_parse_enrollment_line_single_name_has_empty_last_name() -> None:
    """A one-token name should fill only the first name."""
    outcome = parse_enrollment_line("1,Plato,1,Acme")

    assert isinstance(outcome, EnrollmentRecord)
    assert (outcome.first_name, outcome.last_name) == ("Plato", "")


def test_parse_enrollment_line_trims_and_collapses_whitespace() -> None:
    """Fields should be trimmed and name whitespace collapsed."""
    outcome = parse_enrollment_line(" 1 ,   John   Doe   , 3 ,   Acme Insurance  ")

    assert outcome == EnrollmentRecord("1", "John", "Doe", 3, "Acme Insurance")


def test_parse_enrollment_line_honours_quoted_delimiters() -> None:
    """Quoted fields may carry embedded commas."""
    outcome = parse_enrollment_line('7,"Doe, John",2,"Acme, Inc."')

    assert isinstance(outcome, EnrollmentRecord)
    assert outcome.first_name == "Doe," and outcome.last_name == "John"
    assert outcome.organization == "Acme, Inc."


def test_parse_enrollment_line_strips_quotes_after_leading_space() -> None:
    """Quotes left behind by padded fields should still be stripped."""
    outcome = parse_enrollment_line('1, "Jane Roe" ,4, "Zenith Health"')

    assert outcome == EnrollmentRecord("1", "Jane", "Roe", 4, "Zenith Health")


def test_parse_enrollment_line_keeps_organization_case() -> None:
    """Organization names should not be case-normalized."""
    outcome = parse_enrollment_line("1,Alice Adams,3,ACME")

    assert isinstance(outcome, EnrollmentRecord) and outcome.organization == "ACME"


def test_parse_enrollment_line_ignores_extra_fields() -> None:
    """Fields after the fourth should not affect the record."""
    outcome = parse_enrollment_line("1,Alice Adams,3,Acme,unexpected,extra")

    assert outcome == EnrollmentRecord("1", "Alice", "Adams", 3, "Acme")


@pytest.mark.parametrize(
    "raw_line",
    ["1,Alice,2", "invalid_line_without_commas", ""],
)
def test_parse_enrollment_line_rejects_short_rows(raw_line: str) -> None:
    """Rows with fewer than four fields should be rejected as malformed."""
    outcome = parse_enrollment_line(raw_line, 5)

    assert outcome == RejectedRow("malformed_row", raw_line, 5)


def test_parse_enrollment_line_rejects_blank_identifier() -> None:
    """An identifier that trims to nothing should be rejected."""
    outcome = parse_enrollment_line("   ,Nobody Home,1,Acme")

    assert isinstance(outcome, RejectedRow) and outcome.reason == "missing_identifier"


@pytest.mark.parametrize("version_text", ["notanumber", "", "-1", "2.5", "1_000", "3a"])
def test_parse_enrollment_line_rejects_invalid_versions(version_text: str) -> None:
    """Non-integer or negative versions should be rejected."""
    raw_line = f"1,Alice Adams,{version_text},Acme"

    outcome = parse_enrollment_line(raw_line)

    assert outcome == RejectedRow("invalid_version", raw_line, 0)


def test_parse_enrollment_line_accepts_explicit_plus_sign() -> None:
    """A leading plus sign should parse like the bare digits."""
    outcome = parse_enrollment_line("1,Alice Adams,+07,Acme")

    assert isinstance(outcome, EnrollmentRecord) and outcome.version == 7


def test_split_full_name_keeps_only_second_token_as_last_name() -> None:
    """Tokens beyond the second should be dropped."""
    assert split_full_name("Mary Ann Smith Jr") == ("Mary", "Ann")


def test_split_full_name_handles_empty_name() -> None:
    """An empty name should yield two empty parts."""
    assert split_full_name("") == ("", "")
