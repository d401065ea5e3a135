"""Enrollment ingestion pipeline.

This package reads and parses enrollment sources and orchestrates the
group, sort, and write stages.
"""
