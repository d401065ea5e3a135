"""Name ordering transform.

Records are ordered by last name, then first name, ignoring case.
Python's sort is stable, so equal names keep bucket order.
"""

from __future__ import annotations

from typing import Mapping

from core.types import EnrollmentRecord, OrganizationBuckets, SortedBuckets


def sort_bucket(bucket: Mapping[str, EnrollmentRecord]) -> tuple[EnrollmentRecord, ...]:
    """Sort one organization bucket by last name then first name.

    Args:
        bucket: Subscriber id to surviving record.

    Returns:
        Records in roster order. Empty last names sort first.
    """
    return tuple(sorted(bucket.values(), key=_name_sort_key))


def sort_buckets(buckets: OrganizationBuckets) -> SortedBuckets:
    """Sort every bucket, preserving organization order."""
    return {organization: sort_bucket(bucket) for organization, bucket in buckets.items()}


def _name_sort_key(record: EnrollmentRecord) -> tuple[str, str]:
    return record.last_name.lower(), record.first_name.lower()
