"""Public SDK surface for enrollment processing.

This module provides a stable import path for library users.
It re-exports the pipeline entry points and typed models.
"""

from __future__ import annotations

from core.config import EnrollmentConfig
from core.errors import (
    EnrollmentConfigError,
    EnrollmentError,
    EnrollmentIngestError,
    EnrollmentWriteError,
    SourceUnavailableError,
)
from core.types import (
    EnrollmentRecord,
    ProcessingSummary,
    ReadResult,
    RejectedRow,
    WriteResult,
)
from ingest.input_reader import read_and_group
from ingest.pipeline import run_enrollment_pipeline
from ingest.record_parser import parse_enrollment_line
from store.roster_writer import (
    build_output_file_name,
    write_organization_file,
    write_organization_files,
)
from transforms.name_sorting import sort_bucket, sort_buckets
from transforms.version_deduplication import group_by_organization

__all__ = [
    "EnrollmentConfig",
    "EnrollmentConfigError",
    "EnrollmentError",
    "EnrollmentIngestError",
    "EnrollmentRecord",
    "EnrollmentWriteError",
    "ProcessingSummary",
    "ReadResult",
    "RejectedRow",
    "SourceUnavailableError",
    "WriteResult",
    "build_output_file_name",
    "group_by_organization",
    "parse_enrollment_line",
    "read_and_group",
    "run_enrollment_pipeline",
    "sort_bucket",
    "sort_buckets",
    "write_organization_file",
    "write_organization_files",
]
