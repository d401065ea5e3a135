"""Runtime configuration model for enrollment processing.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

import codecs
import os
from dataclasses import dataclass
from pathlib import Path

from core.constants import (
    DEFAULT_OUTPUT_DIR,
    DEFAULT_SOURCE_ENCODING,
    FALSY_ENV_VALUES,
    TRUTHY_ENV_VALUES,
)
from core.errors import EnrollmentConfigError


@dataclass(frozen=True)
class EnrollmentConfig:
    """Validated runtime configuration.

    Attributes:
        output_dir: Directory receiving one roster file per organization.
        fold_organization_case: Group organizations case-insensitively.
        source_encoding: Text encoding used to decode the input file.
    """

    output_dir: Path
    fold_organization_case: bool
    source_encoding: str

    @classmethod
    def from_env(cls) -> "EnrollmentConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            EnrollmentConfigError: If environment values are invalid.
        """
        output_dir_value = os.getenv("ENROLLMENT_OUTPUT_DIR", str(DEFAULT_OUTPUT_DIR))
        fold_case_value = os.getenv("ENROLLMENT_FOLD_ORGANIZATION_CASE", "false")
        encoding_value = os.getenv("ENROLLMENT_SOURCE_ENCODING", DEFAULT_SOURCE_ENCODING)
        return cls(
            output_dir=Path(output_dir_value).expanduser().resolve(),
            fold_organization_case=_parse_flag("ENROLLMENT_FOLD_ORGANIZATION_CASE", fold_case_value),
            source_encoding=_parse_encoding(encoding_value),
        )


def _parse_flag(variable_name: str, raw_value: str) -> bool:
    """Parse a boolean environment flag.

    Args:
        variable_name: Environment variable name for error context.
        raw_value: Raw string from environment.

    Returns:
        Parsed boolean value.

    Raises:
        EnrollmentConfigError: If value is not a recognized flag literal.
    """
    normalized = raw_value.strip().lower()
    if normalized in TRUTHY_ENV_VALUES:
        return True
    if normalized in FALSY_ENV_VALUES:
        return False
    raise EnrollmentConfigError(
        f"Invalid {variable_name} value: expected one of "
        f"{TRUTHY_ENV_VALUES + FALSY_ENV_VALUES[:-1]}, got '{raw_value}'. "
        f"Set {variable_name} to true or false."
    )


def _parse_encoding(raw_value: str) -> str:
    """Validate the source encoding environment value.

    Args:
        raw_value: Raw codec name from environment.

    Returns:
        The codec name, unchanged.

    Raises:
        EnrollmentConfigError: If the codec is unknown.
    """
    try:
        codecs.lookup(raw_value)
    except LookupError as error:
        raise EnrollmentConfigError(
            "Invalid ENROLLMENT_SOURCE_ENCODING value: "
            f"unknown codec '{raw_value}'. "
            "Set ENROLLMENT_SOURCE_ENCODING to a Python codec name such as utf-8."
        ) from error
    return raw_value
