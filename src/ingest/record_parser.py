"""Enrollment row parser.

This module turns one raw source line into an enrollment record or a
tagged rejection. Rejections are values, never exceptions, so a bad
row cannot stop the read.
"""

from __future__ import annotations

import csv
import re

from core.constants import FIELD_DELIMITER, INPUT_FIELD_COUNT, NAME_SEPARATOR, QUOTE_CHAR
from core.types import EnrollmentRecord, ParseOutcome, RejectedRow

_VERSION_PATTERN = re.compile(r"\+?[0-9]+")


def parse_enrollment_line(raw_line: str, line_number: int = 0) -> ParseOutcome:
    """Parse one source line.

    Fields are subscriber id, full name, version, and organization. A field
    starting with a double quote may contain delimiters; fields past the
    fourth are ignored.

    Args:
        raw_line: Line text without its trailing newline.
        line_number: One-based source line number for diagnostics.

    Returns:
        The parsed record, or a ``RejectedRow`` naming why it was refused.
    """
    try:
        fields = split_fields(raw_line)
    except csv.Error:
        fields = []
    if len(fields) < INPUT_FIELD_COUNT:
        return RejectedRow(reason="malformed_row", raw_line=raw_line, line_number=line_number)
    subscriber_id = fields[0].strip()
    full_name = _collapse_whitespace(_strip_enclosing_quotes(fields[1].strip()))
    version_text = fields[2].strip()
    organization = _strip_enclosing_quotes(fields[3].strip()).strip()
    if not subscriber_id:
        return RejectedRow(reason="missing_identifier", raw_line=raw_line, line_number=line_number)
    if not _VERSION_PATTERN.fullmatch(version_text):
        return RejectedRow(reason="invalid_version", raw_line=raw_line, line_number=line_number)
    first_name, last_name = split_full_name(full_name)
    return EnrollmentRecord(
        subscriber_id=subscriber_id,
        first_name=first_name,
        last_name=last_name,
        version=int(version_text),
        organization=organization,
    )


def split_fields(raw_line: str) -> list[str]:
    """Split a line on the delimiter, honouring double-quoted fields."""
    reader = csv.reader([raw_line], delimiter=FIELD_DELIMITER, quotechar=QUOTE_CHAR)
    return next(reader, [])


def split_full_name(full_name: str) -> tuple[str, str]:
    """Split a cleaned full name into first and last name.

    Only the first two tokens are kept: ``"Mary Ann Smith"`` yields
    ``("Mary", "Ann")``.

    Args:
        full_name: Name with whitespace already collapsed.

    Returns:
        First and last name; either may be empty.
    """
    if not full_name:
        return "", ""
    parts = full_name.split(NAME_SEPARATOR)
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1]


def _strip_enclosing_quotes(value: str) -> str:
    """Remove one pair of enclosing double quotes when present."""
    if len(value) >= 2 and value.startswith(QUOTE_CHAR) and value.endswith(QUOTE_CHAR):
        return value[1:-1]
    return value


def _collapse_whitespace(value: str) -> str:
    """Collapse whitespace runs to single separators and trim the ends."""
    return NAME_SEPARATOR.join(value.split())
