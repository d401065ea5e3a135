"""Core constants used across enrollment modules.

This module centralizes file format literals and defaults.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_OUTPUT_DIR = Path("output")
DEFAULT_SOURCE_ENCODING = "utf-8"
OUTPUT_ENCODING = "utf-8"
FIELD_DELIMITER = ","
QUOTE_CHAR = '"'
NAME_SEPARATOR = " "
INPUT_FIELD_COUNT = 4
OUTPUT_HEADER = ("User ID", "Full Name", "Version", "Insurance Company")
OUTPUT_FILE_EXTENSION = ".csv"
OUTPUT_LINE_TERMINATOR = "\n"
EMPTY_ORGANIZATION_FILE_STEM = "unnamed_organization"
TRUTHY_ENV_VALUES = ("1", "true", "yes", "on")
FALSY_ENV_VALUES = ("0", "false", "no", "off", "")
