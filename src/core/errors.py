"""Enrollment exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each pipeline stage raises a specific error type for debuggability.
"""

from __future__ import annotations


class EnrollmentError(Exception):
    """Base exception for all enrollment processing failures."""


class EnrollmentConfigError(EnrollmentError):
    """Raised for invalid runtime configuration."""


class EnrollmentIngestError(EnrollmentError):
    """Raised for source reading and parsing failures."""


class SourceUnavailableError(EnrollmentIngestError):
    """Raised when the enrollment source cannot be opened or read at all."""


class EnrollmentWriteError(EnrollmentError):
    """Raised when an organization roster cannot be persisted."""
