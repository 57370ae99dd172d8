#!/usr/bin/env python3
"""
analytics.py
--------------------
Backend-independent pieces of the gap and frequency analytics.

Both backends collect their raw data in their own way (a scan of the
in-memory map, or SQL queries) and hand it to these helpers so that the
ordering rules are identical regardless of storage.
"""
from __future__ import annotations

from collections import Counter
from datetime import date, timedelta
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple

from genee.core.exceptions import ValidationError

from .base import HeaderItem, Signature


def merge_missing_dates(
    existing_dates: Iterable[date], start: date, until: date
) -> List[date]:
    """
    Merge sorted existing dates against the daily sequence start..until.

    Args:
        existing_dates: Tracked dates in ascending order
        start: First expected date (inclusive)
        until: Last expected date (inclusive)

    Returns:
        Every expected date not matched by an existing one
    """
    present = iter(existing_dates)
    next_present = next(present, None)
    missing = []

    current = start
    while current <= until:
        while next_present is not None and next_present < current:
            next_present = next(present, None)
        if next_present != current:
            missing.append(current)
        current += timedelta(days=1)
    return missing


def count_signatures(signatures: Iterable[Sequence[int]]) -> Counter:
    """Count day signatures, normalizing each to a sorted tuple."""
    return Counter(tuple(sorted(ids)) for ids in signatures)


def rank_signatures(
    counts: Mapping[Signature, int], limit: Optional[int] = None
) -> List[Tuple[Signature, int]]:
    """
    Order signatures by occurrence count descending, then by signature.

    Args:
        counts: Occurrences per signature
        limit: Maximum number of results (None for all)

    Raises:
        ValidationError: If limit is negative
    """
    if limit is not None and limit < 0:
        raise ValidationError(f"Limit must not be negative, got {limit}")
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return ranked if limit is None else ranked[:limit]


def decode_habit_vector(header: Sequence[HeaderItem], ids: Iterable[int]) -> List[bool]:
    """Convert category ids to a boolean vector aligned with the header."""
    active = set(ids)
    return [item.id in active for item in header]


def encode_habit_vector(header: Sequence[HeaderItem], flags: Sequence[bool]) -> List[int]:
    """
    Convert a boolean vector aligned with the header to category ids.

    Raises:
        ValidationError: If the vector width does not match the header
    """
    if len(flags) != len(header):
        raise ValidationError(
            f"The provided row has {len(flags)} values but the header has "
            f"{len(header)} categories"
        )
    return [item.id for item, flag in zip(header, flags) if flag]


def resolve_category_ids(header: Sequence[HeaderItem], names: Iterable[str]) -> List[int]:
    """
    Look up visible category ids by name.

    Raises:
        ValidationError: If a name is not a visible category
    """
    ids_by_name = {}
    for item in header:
        ids_by_name.setdefault(item.name, item.id)

    ids = []
    unknown = []
    for name in names:
        if name in ids_by_name:
            ids.append(ids_by_name[name])
        else:
            unknown.append(name)
    if unknown:
        raise ValidationError(f"Unknown categories: {', '.join(unknown)}")
    return sorted(set(ids))
