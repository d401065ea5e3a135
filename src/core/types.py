"""Shared typed models.

This module defines immutable data models used by the parser,
grouping, sorting, and writer stages to keep interfaces explicit.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Mapping, Union

from core.constants import NAME_SEPARATOR

RejectionReason = Literal["malformed_row", "missing_identifier", "invalid_version"]


@dataclass(frozen=True)
class EnrollmentRecord:
    """One parsed enrollee row.

    Attributes:
        subscriber_id: Identifier unique within one organization.
        first_name: First token of the full name.
        last_name: Second token of the full name, possibly empty.
        version: Non-negative revision marker for the subscriber.
        organization: Grouping key as it appeared in the source.
    """

    subscriber_id: str
    first_name: str
    last_name: str
    version: int
    organization: str

    @property
    def full_name(self) -> str:
        """Join first and last name, omitting an empty part."""
        return NAME_SEPARATOR.join(part for part in (self.first_name, self.last_name) if part)


@dataclass(frozen=True)
class RejectedRow:
    """A source line the parser refused.

    Attributes:
        reason: Rejection category.
        raw_line: Source line exactly as read.
        line_number: One-based line number in the source, header included.
    """

    reason: RejectionReason
    raw_line: str
    line_number: int = 0


ParseOutcome = Union[EnrollmentRecord, RejectedRow]
OrganizationBucket = dict[str, EnrollmentRecord]
OrganizationBuckets = dict[str, OrganizationBucket]
SortedBuckets = dict[str, tuple[EnrollmentRecord, ...]]


@dataclass(frozen=True)
class ReadResult:
    """Outcome of reading and grouping one source file.

    Attributes:
        buckets: Organization key to subscriber id to surviving record.
        accepted_count: Number of rows parsed into records.
        rejected_rows: Rows refused by the parser, in source order.
    """

    buckets: OrganizationBuckets
    accepted_count: int
    rejected_rows: tuple[RejectedRow, ...]

    @property
    def rows_read(self) -> int:
        """Count non-blank data rows seen."""
        return self.accepted_count + len(self.rejected_rows)


@dataclass(frozen=True)
class WriteResult:
    """Outcome of writing one organization roster.

    Attributes:
        organization: Organization key of the bucket.
        output_path: Target roster file path.
        record_count: Number of records in the bucket.
        error: Failure message when the write did not succeed.
    """

    organization: str
    output_path: Path
    record_count: int
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        """Return whether the roster file was written."""
        return self.error is None


@dataclass(frozen=True)
class ProcessingSummary:
    """Final report for one pipeline invocation.

    Attributes:
        source_path: Input file that was processed.
        output_dir: Directory that received roster files.
        read_result: Reading and grouping outcome.
        sorted_buckets: Sorted records per organization.
        write_results: Per-organization write outcomes.
    """

    source_path: Path
    output_dir: Path
    read_result: ReadResult
    sorted_buckets: SortedBuckets
    write_results: tuple[WriteResult, ...]

    @property
    def rejection_counts(self) -> Mapping[RejectionReason, int]:
        """Count rejected rows by reason."""
        return Counter(row.reason for row in self.read_result.rejected_rows)

    @property
    def files_written(self) -> int:
        """Count roster files written successfully."""
        return sum(1 for result in self.write_results if result.succeeded)

    @property
    def failed_writes(self) -> tuple[WriteResult, ...]:
        """Return write results that failed."""
        return tuple(result for result in self.write_results if not result.succeeded)
