"""Enrollment pipeline orchestration.

This module runs read, deduplicate, group, sort, and write stages in
sequence for one invocation and reports what happened.
"""

from __future__ import annotations

from pathlib import Path

from core.config import EnrollmentConfig
from core.logging_config import get_logger
from core.types import ProcessingSummary
from ingest.input_reader import read_and_group
from store.roster_writer import write_organization_files
from transforms.name_sorting import sort_buckets

_LOGGER = get_logger(__name__)


def run_enrollment_pipeline(
    source_path: str | Path,
    config: EnrollmentConfig,
) -> ProcessingSummary:
    """Split an enrollment file into sorted per-organization rosters.

    Args:
        source_path: Path to the enrollment file.
        config: Runtime configuration.

    Returns:
        Summary of accepted, rejected, and written data.

    Raises:
        SourceUnavailableError: If the source cannot be read.
        EnrollmentWriteError: If the output directory cannot be created.
    """
    path = Path(source_path).expanduser()
    read_result = read_and_group(path, config)
    sorted_buckets = sort_buckets(read_result.buckets)
    write_results = write_organization_files(sorted_buckets, config.output_dir)
    summary = ProcessingSummary(
        source_path=path,
        output_dir=config.output_dir,
        read_result=read_result,
        sorted_buckets=sorted_buckets,
        write_results=tuple(write_results),
    )
    _log_pipeline_completion(summary)
    return summary


def _log_pipeline_completion(summary: ProcessingSummary) -> None:
    """Log pipeline completion with contextual metadata."""
    _LOGGER.info(
        "enrollment_pipeline_completed",
        source_path=str(summary.source_path),
        output_dir=str(summary.output_dir),
        rows_read=summary.read_result.rows_read,
        accepted_count=summary.read_result.accepted_count,
        rejected_count=len(summary.read_result.rejected_rows),
        organization_count=len(summary.sorted_buckets),
        files_written=summary.files_written,
        failed_writes=len(summary.failed_writes),
    )
