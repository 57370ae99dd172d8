#!/usr/bin/env python3
"""
date_ranges.py
--------------------
Date window computation for periodic aggregation and paging.
"""
from __future__ import annotations

from datetime import date, timedelta
from typing import Iterator, List

from .base import DateRange


def get_date_ranges(from_date: date, range_size: int, iters: int) -> List[DateRange]:
    """
    Calculate consecutive, non-overlapping date windows walking backwards.

    For example when range_size is 30, iters is 3 and from_date is today,
    the result holds the last 30 days, the 30 days before that, and the
    30 days before the latter one.

    Args:
        from_date: Latest date of the first window
        range_size: Width of each window in days (positive)
        iters: Number of windows (positive)

    Returns:
        List of (later, earlier) pairs, both bounds inclusive

    Examples:
        >>> get_date_ranges(date(2000, 5, 30), 5, 2)
        [(datetime.date(2000, 5, 30), datetime.date(2000, 5, 26)), (datetime.date(2000, 5, 25), datetime.date(2000, 5, 21))]
    """
    ranges = []
    for i in range(iters):
        start_offset = i * range_size
        end_offset = start_offset + range_size - 1
        ranges.append(
            (
                from_date - timedelta(days=start_offset),
                from_date - timedelta(days=end_offset),
            )
        )
    return ranges


def iter_days(start: date, until: date) -> Iterator[date]:
    """Yield every date from start to until, both inclusive."""
    current = start
    while current <= until:
        yield current
        current += timedelta(days=1)
