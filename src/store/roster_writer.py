"""Per-organization roster file writer.

This module serializes sorted buckets to one CSV file per organization.
A failure for one organization is recorded and logged while the
remaining organizations still write.
"""

from __future__ import annotations

import csv
import re
from pathlib import Path
from typing import Iterable, TextIO

from core.constants import (
    EMPTY_ORGANIZATION_FILE_STEM,
    FIELD_DELIMITER,
    OUTPUT_ENCODING,
    OUTPUT_FILE_EXTENSION,
    OUTPUT_HEADER,
    OUTPUT_LINE_TERMINATOR,
)
from core.errors import EnrollmentWriteError
from core.logging_config import get_logger
from core.types import EnrollmentRecord, SortedBuckets, WriteResult

_LOGGER = get_logger(__name__)
_UNSAFE_FILE_CHARS = re.compile(r"[^a-zA-Z0-9\-_ ]")
_SPACE_RUNS = re.compile(r" +")


def build_output_file_name(organization: str) -> str:
    """Derive a file-system safe roster file name.

    Args:
        organization: Organization name as grouped.

    Returns:
        Sanitized name with the roster extension, e.g.
        ``"A*c/m:e Insurance"`` becomes ``"A_c_m_e_Insurance.csv"``.
    """
    stem = _SPACE_RUNS.sub("_", _UNSAFE_FILE_CHARS.sub("_", organization))
    return f"{stem or EMPTY_ORGANIZATION_FILE_STEM}{OUTPUT_FILE_EXTENSION}"


def write_organization_file(
    organization: str,
    records: Iterable[EnrollmentRecord],
    output_dir: Path,
) -> Path:
    """Write one organization roster, replacing any previous file.

    Args:
        organization: Organization name used for the file name.
        records: Records in roster order.
        output_dir: Existing output directory.

    Returns:
        Path of the written file.

    Raises:
        EnrollmentWriteError: If the file cannot be written.
    """
    file_path = output_dir / build_output_file_name(organization)
    try:
        with file_path.open("w", encoding=OUTPUT_ENCODING, newline="") as handle:
            write_roster(handle, records)
    except OSError as error:
        raise EnrollmentWriteError(
            f"Failed to write roster for organization '{organization}' to {file_path}: "
            f"{error.strerror or error}. Check disk space and directory permissions."
        ) from error
    return file_path


def write_roster(handle: TextIO, records: Iterable[EnrollmentRecord]) -> None:
    """Write the header and one row per record to an open text stream."""
    writer = csv.writer(
        handle, delimiter=FIELD_DELIMITER, lineterminator=OUTPUT_LINE_TERMINATOR
    )
    writer.writerow(OUTPUT_HEADER)
    for record in records:
        writer.writerow(
            [record.subscriber_id, record.full_name, record.version, record.organization]
        )


def write_organization_files(sorted_buckets: SortedBuckets, output_dir: Path) -> list[WriteResult]:
    """Write every organization roster under an output directory.

    The directory is created even when there is nothing to write. Two
    organizations that sanitize to the same file name, ignoring case,
    do not overwrite each other: the later one is reported as failed.

    Args:
        sorted_buckets: Organization to records in roster order.
        output_dir: Target directory, created with parents when missing.

    Returns:
        One write result per organization, in bucket order.

    Raises:
        EnrollmentWriteError: If the output directory cannot be created.
    """
    ensure_output_dir(output_dir)
    results: list[WriteResult] = []
    claimed_names: dict[str, str] = {}
    for organization, records in sorted_buckets.items():
        file_name = build_output_file_name(organization)
        file_path = output_dir / file_name
        claim_key = file_name.lower()
        try:
            if claim_key in claimed_names:
                raise EnrollmentWriteError(
                    f"Roster file name {file_name} for organization '{organization}' "
                    f"collides with organization '{claimed_names[claim_key]}'. "
                    "Rename one organization in the source file."
                )
            claimed_names[claim_key] = organization
            write_organization_file(organization, records, output_dir)
        except EnrollmentWriteError as error:
            _LOGGER.error(
                "roster_write_failed",
                organization=organization,
                output_path=str(file_path),
                error=str(error),
            )
            results.append(
                WriteResult(organization, file_path, len(records), error=str(error))
            )
            continue
        _LOGGER.info(
            "roster_file_written",
            organization=organization,
            output_path=str(file_path),
            record_count=len(records),
        )
        results.append(WriteResult(organization, file_path, len(records)))
    return results


def ensure_output_dir(output_dir: Path) -> None:
    """Create the output directory and its parents when missing.

    Raises:
        EnrollmentWriteError: If the directory cannot be created.
    """
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as error:
        raise EnrollmentWriteError(
            f"Failed to create output directory {output_dir}: "
            f"{error.strerror or error}. Choose a writable ENROLLMENT_OUTPUT_DIR."
        ) from error
    _LOGGER.info("roster_output_dir_ready", output_dir=str(output_dir))
