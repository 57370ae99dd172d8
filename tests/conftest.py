"""
conftest.py
-----------
Shared pytest fixtures for genee tests.

Provides fixtures for:
- Temporary directories
- Diaries of both backends, freshly created
- Sample data matching the worked range-count example
"""
import pytest
from datetime import date
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import MagicMock

from genee.core.logging_manager import GeneeLogger
from genee.datafile import create_new_datafile, open_datafile


HEADERS = ["Running", "Reading", "Meditation"]

# Five rows whose counts over get_date_ranges(2021-01-05, 2, 3) are
# [[2, 1, 1], [2, 1, 0], [1, 0, 0]]
SAMPLE_ROWS = [
    (date(2021, 1, 5), [1, 2, 3]),
    (date(2021, 1, 4), [1]),
    (date(2021, 1, 3), [1, 2]),
    (date(2021, 1, 2), [1]),
    (date(2021, 1, 1), [1]),
]


# ----- Path Fixtures -----

@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def csv_path(tmp_dir):
    return tmp_dir / "diary.csv"


@pytest.fixture
def db_path(tmp_dir):
    return tmp_dir / "diary.db"


# ----- Logger Fixtures -----

@pytest.fixture
def mock_logger():
    """Logger double for asserting log calls."""
    return MagicMock(spec=GeneeLogger)


# ----- Diary Fixtures -----

@pytest.fixture(params=["csv", "db"])
def diary_path(request, tmp_dir):
    """A new diary with HEADERS, once per backend."""
    path = tmp_dir / f"diary.{request.param}"
    create_new_datafile(path, HEADERS)
    return path


@pytest.fixture
def diary(diary_path):
    """Open connection to diary_path, closed after the test."""
    connection = open_datafile(diary_path)
    yield connection
    connection.close()


@pytest.fixture
def sample_diary(diary):
    """diary filled with SAMPLE_ROWS."""
    diary.update_rows_batch(SAMPLE_ROWS)
    return diary


@pytest.fixture
def sqlite_diary(db_path):
    """Open relational diary with HEADERS."""
    create_new_datafile(db_path, HEADERS)
    connection = open_datafile(db_path)
    yield connection
    connection.close()
