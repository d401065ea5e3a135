"""Unit tests for CLI command handling."""

from __future__ import annotations

import io
from pathlib import Path

from cli.main import main
from tests.fixture_paths import write_enrollment_source


def test_cli_process_writes_rosters_and_prints_summary(tmp_path: Path, capsys) -> None:
    """CLI process should write files and print the roster."""
    source = write_enrollment_source(
        tmp_path, "1,Alice Adams,2,Acme", "2,Bob Brown,1,Acme", "3,Plato,1,Zenith"
    )
    output_dir = tmp_path / "output"

    exit_code = main(["--output-dir", str(output_dir), "process", str(source)])
    output = capsys.readouterr().out

    assert exit_code == 0
    assert sorted(path.name for path in output_dir.iterdir()) == ["Acme.csv", "Zenith.csv"]
    assert "Enrollment File Processor" in output
    assert "Acme\n====" in output
    assert "  1          | Alice        Adams        | v2" in output


def test_cli_process_prompts_for_missing_source(tmp_path: Path, capsys, monkeypatch) -> None:
    """Omitting the source should read it from standard input."""
    source = write_enrollment_source(tmp_path, "1,Alice Adams,2,Acme")
    monkeypatch.setattr("sys.stdin", io.StringIO(f"{source}\n"))

    exit_code = main(["--output-dir", str(tmp_path / "out"), "process", "--no-roster"])
    output = capsys.readouterr().out

    assert exit_code == 0
    assert "Enter the path to the CSV file: " in output
    assert "Enrollees by Insurance Company" not in output


def test_cli_process_reports_rejected_rows(tmp_path: Path, capsys) -> None:
    """Rejections should be summarized by reason."""
    source = write_enrollment_source(tmp_path, "1,Alice,2", "2,Bob Brown,x,Acme")

    exit_code = main(["--output-dir", str(tmp_path / "out"), "process", str(source)])
    output = capsys.readouterr().out

    assert exit_code == 0
    assert "Skipped 1 row(s): invalid_version" in output
    assert "Skipped 1 row(s): malformed_row" in output


def test_cli_process_folds_organization_case(tmp_path: Path) -> None:
    """The fold flag should merge organizations that differ only in case."""
    source = write_enrollment_source(tmp_path, "1,Alice Adams,2,Acme", "1,Alice Adams,3,ACME")
    output_dir = tmp_path / "out"

    main(["--output-dir", str(output_dir), "--fold-organization-case", "process", str(source)])

    assert [path.name for path in output_dir.iterdir()] == ["acme.csv"]


def test_cli_process_returns_error_for_missing_source(tmp_path: Path, capsys) -> None:
    """A missing source should print an error and exit non-zero."""
    exit_code = main(
        ["--output-dir", str(tmp_path / "out"), "process", str(tmp_path / "missing.csv")]
    )
    captured = capsys.readouterr()

    assert exit_code == 1
    assert captured.err.startswith("Error during processing: Failed to read enrollment source")


def test_cli_process_returns_error_when_stdin_is_closed(tmp_path: Path, capsys, monkeypatch) -> None:
    """A closed standard input should end with an error line instead of a traceback."""
    monkeypatch.setattr("sys.stdin", io.StringIO(""))

    exit_code = main(["--output-dir", str(tmp_path / "out"), "process"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert captured.err.startswith("Error during processing: No enrollment source path given")
