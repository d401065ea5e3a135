"""Enrollment CLI entry points.

This module exposes the process command that splits an enrollment file
into per-organization rosters. It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any, Sequence

from core.config import EnrollmentConfig
from core.errors import EnrollmentError, SourceUnavailableError
from core.types import ProcessingSummary
from ingest.pipeline import run_enrollment_pipeline

SOURCE_PROMPT = "Enter the path to the CSV file: "


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="enrollment", description="Split enrollment files by organization"
    )
    parser.add_argument("--output-dir", help="Override ENROLLMENT_OUTPUT_DIR for this command")
    parser.add_argument(
        "--fold-organization-case",
        action="store_true",
        help="Group organizations case-insensitively",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_process_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the enrollment CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = _build_config(args.output_dir, args.fold_organization_case)
        if args.command == "process":
            return _run_process_command(config, args)
    except EnrollmentError as error:
        print(f"Error during processing: {error}", file=sys.stderr)
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_config(output_dir: str | None, fold_organization_case: bool) -> EnrollmentConfig:
    """Build runtime config with optional CLI overrides.

    Args:
        output_dir: Optional output directory override.
        fold_organization_case: Force case-insensitive grouping when set.

    Returns:
        Validated config.
    """
    config = EnrollmentConfig.from_env()
    if output_dir:
        config = replace(config, output_dir=Path(output_dir).expanduser().resolve())
    if fold_organization_case:
        config = replace(config, fold_organization_case=True)
    return config


def _run_process_command(config: EnrollmentConfig, args: argparse.Namespace) -> int:
    """Handle process command.

    Args:
        config: Runtime config.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    source = args.source or _prompt_for_source()
    print("\nEnrollment File Processor")
    summary = run_enrollment_pipeline(source, config)
    print("Successfully read and grouped enrollees by insurance company.")
    print("Successfully sorted enrollees (last name, first name).")
    print(f"Wrote {summary.files_written} CSV file(s) to: {summary.output_dir}")
    _print_problems(summary)
    if not args.no_roster:
        _print_roster(summary)
    return 0


def _prompt_for_source() -> str:
    """Read the source path from standard input.

    Raises:
        SourceUnavailableError: If standard input is closed before a path is given.
    """
    try:
        return input(SOURCE_PROMPT).strip()
    except EOFError as error:
        raise SourceUnavailableError(
            "No enrollment source path given: standard input is closed. "
            "Pass the source file as an argument to the process command."
        ) from error


def _print_problems(summary: ProcessingSummary) -> None:
    """Print rejected rows and failed writes, if any."""
    for reason, count in sorted(summary.rejection_counts.items()):
        print(f"Skipped {count} row(s): {reason}")
    for result in summary.failed_writes:
        print(f"Failed to write {result.output_path}: {result.error}")


def _print_roster(summary: ProcessingSummary) -> None:
    """Print the sorted roster of every organization."""
    print("\nEnrollees by Insurance Company:")
    for organization, records in summary.sorted_buckets.items():
        print(f"\n{organization}")
        print("=" * len(organization))
        for record in records:
            print(
                f"  {record.subscriber_id:<10} | "
                f"{record.first_name:<12} {record.last_name:<12} | v{record.version:<2}"
            )


def _add_process_command(subparsers: Any) -> None:
    """Register process subcommand."""
    parser = subparsers.add_parser(
        "process", help="Split an enrollment file into per-organization rosters"
    )
    parser.add_argument("source", nargs="?", help="Enrollment CSV file; prompted when omitted")
    parser.add_argument(
        "--no-roster",
        action="store_true",
        help="Skip printing the per-organization roster",
    )
