"""
test_date_ranges.py
-------------------
Unit tests for the date window computation.
"""
import pytest
from datetime import date, timedelta

from genee.datafile.date_ranges import get_date_ranges, iter_days


class TestGetDateRanges:
    """Test get_date_ranges()."""

    def test_worked_example(self):
        """Three five-day windows walking back from 2000-05-30."""
        assert get_date_ranges(date(2000, 5, 30), 5, 3) == [
            (date(2000, 5, 30), date(2000, 5, 26)),
            (date(2000, 5, 25), date(2000, 5, 21)),
            (date(2000, 5, 20), date(2000, 5, 16)),
        ]

    def test_single_day_windows(self):
        assert get_date_ranges(date(2021, 1, 2), 1, 2) == [
            (date(2021, 1, 2), date(2021, 1, 2)),
            (date(2021, 1, 1), date(2021, 1, 1)),
        ]

    def test_crosses_year_boundary(self):
        assert get_date_ranges(date(2021, 1, 5), 2, 3)[-1] == (
            date(2021, 1, 1),
            date(2020, 12, 31),
        )

    @pytest.mark.parametrize("size, iters", [(1, 1), (7, 4), (30, 12)])
    def test_windows_are_contiguous(self, size, iters):
        """Windows have the requested width, with no gap or overlap."""
        ranges = get_date_ranges(date(2023, 3, 1), size, iters)

        assert len(ranges) == iters
        for later, earlier in ranges:
            assert (later - earlier).days == size - 1
        for (_, earlier), (next_later, _) in zip(ranges, ranges[1:]):
            assert earlier - next_later == timedelta(days=1)


class TestIterDays:
    """Test iter_days()."""

    def test_inclusive(self):
        assert list(iter_days(date(2023, 2, 27), date(2023, 3, 1))) == [
            date(2023, 2, 27),
            date(2023, 2, 28),
            date(2023, 3, 1),
        ]

    def test_empty_when_reversed(self):
        assert list(iter_days(date(2023, 3, 1), date(2023, 2, 27))) == []
