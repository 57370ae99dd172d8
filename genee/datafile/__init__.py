"""
Diary data files.

A diary lives either in a CSV file or in a SQLite database. The backend is
chosen by file extension alone: exactly "csv" selects the flat file, any
other extension (or none) selects the database.

Usage:
    from genee.datafile import open_datafile

    with open_datafile(Path("diary.db")) as diary:
        header = diary.get_header()
"""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Union

from genee.core.exceptions import DataFileError
from genee.core.logging_manager import GeneeLogger, safe_logger
from genee.core.validators import DataValidator

from .analytics import (
    decode_habit_vector,
    encode_habit_vector,
    resolve_category_ids,
)
from .base import (
    AddCategoryResult,
    DiaryDataConnection,
    HeaderItem,
    HideCategoryResult,
    SuccessfulUpdate,
)
from .date_ranges import get_date_ranges

__all__ = [
    "AddCategoryResult",
    "DiaryDataConnection",
    "HeaderItem",
    "HideCategoryResult",
    "SuccessfulUpdate",
    "create_new_datafile",
    "decode_habit_vector",
    "encode_habit_vector",
    "get_date_ranges",
    "is_csv_path",
    "open_datafile",
    "resolve_category_ids",
]


def is_csv_path(path: Union[str, Path]) -> bool:
    """Whether the path selects the flat-file backend."""
    return Path(path).suffix == ".csv"


def open_datafile(
    path: Union[str, Path], logger: Optional[GeneeLogger] = None
) -> DiaryDataConnection:
    """
    Open an existing diary with the backend matching its extension.

    Raises:
        DataFileError: If a CSV diary cannot be read or parsed
        DatabaseError: If a SQLite diary is missing or cannot be opened
    """
    path = Path(path)
    safe_logger(logger).log_debug("open_datafile", {"path": str(path)})
    if is_csv_path(path):
        from .csv_datafile import CsvDiary

        return CsvDiary.open(path, logger)

    from genee.database.manager import SqliteDiary

    return SqliteDiary(path, logger)


def create_new_datafile(
    path: Union[str, Path],
    categories: Iterable[str],
    logger: Optional[GeneeLogger] = None,
) -> None:
    """
    Create a new diary with the given categories.

    Raises:
        ValidationError: If no categories or a blank name is given
        DataFileError: If a file already exists at path
    """
    path = Path(path)
    names = DataValidator.normalize_category_names(categories)
    if path.exists():
        raise DataFileError(f"A file already exists at '{path}'")

    if is_csv_path(path):
        from .csv_datafile import create_new_csv

        create_new_csv(path, names)
    else:
        from genee.database.manager import create_new_sqlite

        create_new_sqlite(path, names, logger)

    safe_logger(logger).log_operation(
        "datafile_created", {"path": str(path), "categories": names}
    )
