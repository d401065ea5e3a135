"""Highest-version deduplication transform.

This module buckets records by organization and keeps one record per
subscriber within each bucket. The highest version survives; among
equal versions the first one seen is kept.
"""

from __future__ import annotations

from typing import Iterable

from core.types import EnrollmentRecord, OrganizationBuckets


def group_by_organization(
    records: Iterable[EnrollmentRecord],
    fold_organization_case: bool = False,
) -> OrganizationBuckets:
    """Group records by organization, resolving duplicate subscribers.

    Args:
        records: Parsed records in source order.
        fold_organization_case: Key buckets by the lower-cased organization
            instead of the exact string.

    Returns:
        Organization key to subscriber id to surviving record. Buckets and
        subscribers keep first-seen order.
    """
    buckets: OrganizationBuckets = {}
    for record in records:
        key = organization_key(record.organization, fold_organization_case)
        bucket = buckets.setdefault(key, {})
        existing = bucket.get(record.subscriber_id)
        if existing is None or existing.version < record.version:
            bucket[record.subscriber_id] = record
    return buckets


def organization_key(organization: str, fold_organization_case: bool) -> str:
    """Return the bucket key for an organization name."""
    if fold_organization_case:
        return organization.lower()
    return organization
