#!/usr/bin/env python3
"""
base.py
--------------------
The connection contract shared by both diary backends.

A diary is a date-indexed record of which habit categories were active on
each tracked day. Rows are exchanged as sorted lists of category ids;
the header maps those ids to category names in display order.

Outcomes that callers are expected to branch on (a new date versus a
replaced one, a category already present or already hidden) are returned
as enum members rather than raised.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from abc import ABC, abstractmethod
from datetime import date
from enum import Enum
from typing import Iterable, List, NamedTuple, Optional, Sequence, Tuple

DateRange = Tuple[date, date]
"""Inclusive (later, earlier) pair as produced by get_date_ranges."""

Signature = Tuple[int, ...]
"""Sorted ids of the visible categories active on one date."""

RowUpdate = Tuple[date, Sequence[int]]


class SuccessfulUpdate(Enum):
    """Result of writing the row of a single date."""

    ADDED_NEW = "added_new"
    REPLACED_EXISTING = "replaced_existing"


class AddCategoryResult(Enum):
    """Result of add_category."""

    ADDED_NEW = "added_new"
    UNHIDE = "unhide"
    ALREADY_PRESENT = "already_present"


class HideCategoryResult(Enum):
    """Result of hide_category."""

    HIDDEN = "hidden"
    ALREADY_HIDDEN = "already_hidden"
    NON_EXISTING_CATEGORY = "non_existing_category"


class HeaderItem(NamedTuple):
    """A visible category as listed in the diary header."""

    name: str
    id: int


class DiaryDataConnection(ABC):
    """
    Connection to an open diary.

    Implemented by CsvDiary (flat file) and SqliteDiary (relational).
    Instances own their storage handle until close() is called and can
    be used as context managers.
    """

    @abstractmethod
    def calculate_counts_per_range(
        self, date_ranges: Sequence[DateRange]
    ) -> List[List[int]]:
        """
        Count the occurrences of every visible category per date range.

        Both bounds of each range are inclusive and may be given in either
        order. The outer list follows date_ranges, the inner list follows
        get_header().
        """

    @abstractmethod
    def update_rows_batch(self, items: Iterable[RowUpdate]) -> List[SuccessfulUpdate]:
        """
        Replace the rows of several dates as one unit of work.

        Returns:
            One outcome per item, in input order
        """

    def update_row(self, day: date, category_ids: Sequence[int]) -> SuccessfulUpdate:
        """
        Replace the set of active categories for a date.

        Returns:
            ADDED_NEW if the date was untracked, REPLACED_EXISTING otherwise
        """
        return self.update_rows_batch([(day, category_ids)])[0]

    @abstractmethod
    def get_missing_dates(self, start: Optional[date], until: date) -> List[date]:
        """
        List untracked dates between start (or the earliest entry) and until.

        Returns an empty list when start is None and the diary is empty.
        """

    @abstractmethod
    def get_header(self) -> List[HeaderItem]:
        """Visible categories in creation order."""

    @abstractmethod
    def get_row(self, day: date) -> Optional[List[int]]:
        """Active visible category ids for a date, or None if untracked."""

    @abstractmethod
    def get_rows(self, start: date, until: date) -> List[Optional[List[int]]]:
        """Rows from until down to start (inclusive), one per calendar day."""

    @abstractmethod
    def is_empty(self) -> bool:
        """Whether the diary has no tracked dates."""

    @abstractmethod
    def get_date_range(self) -> Tuple[date, date]:
        """
        Earliest and latest tracked dates.

        Raises:
            EmptyDiaryError: If the diary has no tracked dates
        """

    @abstractmethod
    def add_category(self, name: str) -> AddCategoryResult:
        """Add a new category or make a hidden one visible again."""

    @abstractmethod
    def hide_category(self, name: str) -> HideCategoryResult:
        """Hide a category without deleting its history."""

    @abstractmethod
    def get_most_frequent_daily_data(
        self, start: Optional[date], until: date, limit: Optional[int] = None
    ) -> List[Tuple[Signature, int]]:
        """
        Rank the distinct day signatures in a date interval by frequency.

        Ties are ordered by signature ascending.
        """

    def close(self) -> None:
        """Release the storage handle."""

    def __enter__(self) -> DiaryDataConnection:
        return self

    def __exit__(self, exc_type, exc_value, tb) -> None:
        self.close()
