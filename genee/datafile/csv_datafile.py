#!/usr/bin/env python3
"""
csv_datafile.py
--------------------
Flat-file diary backend.

The whole file is loaded into memory on open and written back in full
after every mutation. This keeps the format trivially hand-editable and
is fine for the size of a personal diary; it is not meant to scale.

File format:
    date,<cat1>,<cat2>,...
    2023-02-04,,x,
    2023-02-05,x,,x

An empty cell means the category was not active on that date, any other
content means it was. Categories are addressed by their 1-based column
position, and the header cannot change after creation, so there is no
notion of hidden categories here.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from datetime import date
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

# --- Local imports ---
from genee.core.exceptions import (
    DataFileError,
    DataFileParseError,
    EmptyDiaryError,
    UnsupportedOperationError,
    ValidationError,
)
from genee.core.logging_manager import GeneeLogger, safe_logger
from genee.core.validators import DATE_FORMAT, DataValidator

from .analytics import count_signatures, merge_missing_dates, rank_signatures
from .base import (
    AddCategoryResult,
    DateRange,
    DiaryDataConnection,
    HeaderItem,
    HideCategoryResult,
    RowUpdate,
    Signature,
    SuccessfulUpdate,
)
from .date_ranges import iter_days

DELIMITER = ","
TRUE_MARK = "x"


class CsvDiary(DiaryDataConnection):
    """
    A complete in-memory representation of a CSV diary file.

    Attributes:
        path: File the diary is read from and saved to
        header: Names of the tracked categories, in column order
        data: Boolean row per tracked date, aligned with header
    """

    def __init__(
        self,
        path: Path,
        header: List[str],
        data: Optional[Dict[date, List[bool]]] = None,
        logger: Optional[GeneeLogger] = None,
    ) -> None:
        self.path = Path(path)
        self.header = list(header)
        self.data: Dict[date, List[bool]] = dict(data or {})
        self.logger = logger

    # ---- Loading & saving ----
    @classmethod
    def open(cls, path: Path, logger: Optional[GeneeLogger] = None) -> CsvDiary:
        """
        Read a CSV diary into memory.

        Raises:
            DataFileError: If the file cannot be read
            DataFileParseError: If the content is malformed
        """
        path = Path(path)
        try:
            lines = path.read_text(encoding="utf-8").splitlines()
        except OSError as e:
            raise DataFileError(f"Cannot open data file at '{path}': {e}") from e

        header = _parse_header(lines[0] if lines else "")
        data: Dict[date, List[bool]] = {}
        for line_number, line in enumerate(lines[1:], start=2):
            if not line.strip():
                continue
            current_date, row = _parse_row(line, line_number, len(header))
            if current_date in data:
                raise DataFileParseError(
                    f"Data file contains duplicated date at line {line_number}. "
                    "Please fix manually!"
                )
            data[current_date] = row

        safe_logger(logger).log_debug(
            "csv_datafile_opened",
            {"path": str(path), "categories": len(header), "rows": len(data)},
        )
        return cls(path, header, data, logger)

    def serialize(self, path: Optional[Path] = None) -> None:
        """
        Write the header and every row, in ascending date order.

        Raises:
            DataFileError: If the file cannot be written
        """
        path = Path(path) if path else self.path
        lines = [DELIMITER.join(["date", *self.header])]
        for day in sorted(self.data):
            lines.append(serialize_row(day, self.data[day]))

        try:
            with open(path, "w", encoding="utf-8", newline="\n") as handle:
                handle.write("\n".join(lines) + "\n")
        except OSError as e:
            raise DataFileError(f"Could not open file for writing: '{path}': {e}") from e

        safe_logger(self.logger).log_operation(
            "csv_datafile_saved", {"path": str(path), "rows": len(self.data)}
        )

    # ---- Id/flag conversion ----
    def _ids_to_flags(self, category_ids: Iterable[int]) -> List[bool]:
        flags = [False] * len(self.header)
        invalid = []
        for category_id in category_ids:
            if (
                isinstance(category_id, int)
                and not isinstance(category_id, bool)
                and 1 <= category_id <= len(self.header)
            ):
                flags[category_id - 1] = True
            else:
                invalid.append(category_id)
        if invalid:
            raise ValidationError(
                f"Unknown category ids {invalid}: the data file has "
                f"{len(self.header)} categories"
            )
        return flags

    @staticmethod
    def _flags_to_ids(flags: Sequence[bool]) -> List[int]:
        return [index for index, flag in enumerate(flags, start=1) if flag]

    # ---- Queries ----
    def calculate_counts_per_range(
        self, date_ranges: Sequence[DateRange]
    ) -> List[List[int]]:
        return [
            self._calculate_counts(min(first, second), max(first, second))
            for first, second in date_ranges
        ]

    def _calculate_counts(self, start: date, until: date) -> List[int]:
        """Occurrences of every category between start and until, inclusive."""
        counts = [0] * len(self.header)
        for day, row in self.data.items():
            if day < start or day > until:
                continue
            for index, value in enumerate(row):
                if value:
                    counts[index] += 1
        return counts

    def get_missing_dates(self, start: Optional[date], until: date) -> List[date]:
        if start is None:
            if not self.data:
                return []
            start = min(self.data)
        return merge_missing_dates(sorted(self.data), start, until)

    def get_header(self) -> List[HeaderItem]:
        return [
            HeaderItem(name, index) for index, name in enumerate(self.header, start=1)
        ]

    def get_row(self, day: date) -> Optional[List[int]]:
        row = self.data.get(day)
        return None if row is None else self._flags_to_ids(row)

    def get_rows(self, start: date, until: date) -> List[Optional[List[int]]]:
        return [self.get_row(day) for day in reversed(list(iter_days(start, until)))]

    def is_empty(self) -> bool:
        return not self.data

    def get_date_range(self) -> Tuple[date, date]:
        if not self.data:
            raise EmptyDiaryError("Diary is empty, no date range available")
        return min(self.data), max(self.data)

    def get_most_frequent_daily_data(
        self, start: Optional[date], until: date, limit: Optional[int] = None
    ) -> List[Tuple[Signature, int]]:
        signatures = (
            self._flags_to_ids(row)
            for day, row in self.data.items()
            if (start is None or day >= start) and day <= until
        )
        return rank_signatures(count_signatures(signatures), limit)

    # ---- Mutations ----
    def update_rows_batch(self, items: Iterable[RowUpdate]) -> List[SuccessfulUpdate]:
        """
        Replace rows in memory, then save the file once.

        If an item is invalid the error is raised before saving, so the
        file on disk is untouched while the rows applied before the bad
        item remain changed in memory.
        """
        results = []
        for day, category_ids in items:
            flags = self._ids_to_flags(category_ids)
            previous = self.data.get(day)
            self.data[day] = flags
            results.append(
                SuccessfulUpdate.ADDED_NEW
                if previous is None
                else SuccessfulUpdate.REPLACED_EXISTING
            )
        self.serialize()
        return results

    def add_category(self, name: str) -> AddCategoryResult:
        name = DataValidator.normalize_category_name(name)
        if name in self.header:
            return AddCategoryResult.ALREADY_PRESENT
        raise UnsupportedOperationError(
            "Categories cannot be added to a CSV data file"
        )

    def hide_category(self, name: str) -> HideCategoryResult:
        name = DataValidator.normalize_category_name(name)
        if name not in self.header:
            return HideCategoryResult.NON_EXISTING_CATEGORY
        raise UnsupportedOperationError(
            "Categories cannot be hidden in a CSV data file"
        )


def serialize_row(day: date, row: Sequence[bool]) -> str:
    """Format a data row with its date as one CSV line."""
    cells = [TRUE_MARK if value else "" for value in row]
    return DELIMITER.join([day.strftime(DATE_FORMAT), *cells])


def create_new_csv(path: Path, headers: Sequence[str]) -> None:
    """
    Create a new, empty CSV diary.

    Raises:
        DataFileError: If a file already exists at path
    """
    path = Path(path)
    if path.exists():
        raise DataFileError(f"A file already exists at '{path}'")
    CsvDiary(path, list(headers)).serialize()


def _parse_header(line: str) -> List[str]:
    # skip 'date'
    names = [part.strip() for part in line.split(DELIMITER)[1:]]
    if not names or any(not name for name in names):
        raise DataFileParseError("Data file header is empty")
    return names


def _parse_row(line: str, line_number: int, width: int) -> Tuple[date, List[bool]]:
    date_str, *cells = line.split(DELIMITER)
    try:
        current_date = DataValidator.parse_date(date_str)
    except ValidationError as e:
        raise DataFileParseError(
            f"Cannot parse date in data file on line {line_number}: '{date_str}'"
        ) from e

    row = [bool(cell.strip()) for cell in cells]
    if len(row) != width:
        raise DataFileParseError(
            f"Number of entries ({len(row)}) on line {line_number} in data file "
            f"does not match number of entries in the header ({width})"
        )
    return current_date, row
