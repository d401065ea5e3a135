"""Roster persistence layer.

This package writes sorted organization rosters to flat files.
"""
