"""Enrollment source reader.

This module loads the enrollment file, parses every data row, reports
rejected rows, and groups accepted records by organization.
"""

from __future__ import annotations

from pathlib import Path

from core.config import EnrollmentConfig
from core.errors import SourceUnavailableError
from core.logging_config import get_logger
from core.types import EnrollmentRecord, ReadResult, RejectedRow
from ingest.record_parser import parse_enrollment_line
from transforms.version_deduplication import group_by_organization

_LOGGER = get_logger(__name__)


def read_and_group(source_path: str | Path, config: EnrollmentConfig) -> ReadResult:
    """Read an enrollment file and build deduplicated organization buckets.

    Args:
        source_path: Path to the delimited enrollment file.
        config: Runtime configuration for encoding and grouping policy.

    Returns:
        Buckets of surviving records plus acceptance and rejection details.

    Raises:
        SourceUnavailableError: If the file cannot be opened or decoded.
    """
    path = Path(source_path).expanduser()
    records, rejected_rows = parse_enrollment_rows(read_data_lines(path, config.source_encoding))
    buckets = group_by_organization(
        records, fold_organization_case=config.fold_organization_case
    )
    _LOGGER.info(
        "enrollment_source_read",
        source_path=str(path),
        accepted_count=len(records),
        rejected_count=len(rejected_rows),
        organization_count=len(buckets),
    )
    return ReadResult(
        buckets=buckets,
        accepted_count=len(records),
        rejected_rows=tuple(rejected_rows),
    )


def read_data_lines(source_path: Path, encoding: str) -> list[tuple[int, str]]:
    """Read the data lines of a source file, skipping the header.

    Args:
        source_path: Input file path.
        encoding: Codec used to decode the file.

    Returns:
        ``(line_number, line)`` pairs; line numbers are one-based and
        count the header.

    Raises:
        SourceUnavailableError: If the path is missing, not a file, or unreadable.
    """
    if not source_path.is_file():
        raise SourceUnavailableError(
            f"Failed to read enrollment source at {source_path}: "
            "path does not exist or is not a file. Provide an existing CSV file."
        )
    try:
        text = source_path.read_text(encoding=encoding)
    except UnicodeDecodeError as error:
        raise SourceUnavailableError(
            f"Failed to decode enrollment source at {source_path} as {encoding}: "
            f"{error.reason}. Set ENROLLMENT_SOURCE_ENCODING to the file's encoding."
        ) from error
    except OSError as error:
        raise SourceUnavailableError(
            f"Failed to read enrollment source at {source_path}: "
            f"{error.strerror or error}. Check the file permissions and retry."
        ) from error
    lines = text.split("\n")
    if lines and not lines[-1]:
        lines.pop()
    return list(enumerate(lines[1:], 2))


def parse_enrollment_rows(
    numbered_lines: list[tuple[int, str]],
) -> tuple[list[EnrollmentRecord], list[RejectedRow]]:
    """Parse numbered data lines, logging every rejection.

    Args:
        numbered_lines: ``(line_number, line)`` pairs from the source.

    Returns:
        Accepted records and rejected rows, both in source order.
    """
    records: list[EnrollmentRecord] = []
    rejected_rows: list[RejectedRow] = []
    for line_number, line in numbered_lines:
        if not line.strip():
            continue
        outcome = parse_enrollment_line(line, line_number)
        if isinstance(outcome, RejectedRow):
            _log_rejection(outcome)
            rejected_rows.append(outcome)
            continue
        records.append(outcome)
    return records, rejected_rows


def _log_rejection(rejected_row: RejectedRow) -> None:
    """Report a rejected row without interrupting the read."""
    _LOGGER.warning(
        "enrollment_row_rejected",
        reason=rejected_row.reason,
        line_number=rejected_row.line_number,
        raw_line=rejected_row.raw_line,
    )
