"""
Random diary generation, for trying out the graphs and for benchmarks.
"""
from __future__ import annotations

import random
import string
from datetime import date, timedelta
from pathlib import Path
from typing import List, Optional, Union

from genee.core.logging_manager import GeneeLogger, safe_logger
from genee.core.validators import DataValidator

from . import create_new_datafile, open_datafile


def random_header(cols: int, rng: random.Random) -> List[str]:
    """One random uppercase letter per category."""
    return [rng.choice(string.ascii_uppercase) for _ in range(cols)]


def generate_diary(
    path: Union[str, Path],
    rows: int,
    cols: int,
    until: Optional[date] = None,
    seed: Optional[int] = None,
    logger: Optional[GeneeLogger] = None,
) -> None:
    """
    Write a new diary filled with random data.

    Args:
        path: Diary to create; the extension selects the backend
        rows: Number of consecutive days, ending at until
        cols: Number of categories
        until: Last generated day (default: today)
        seed: Seed for reproducible output

    Raises:
        ValidationError: If rows or cols is not a positive integer
        DataFileError: If a file already exists at path
    """
    rows = DataValidator.validate_positive_int(rows, "rows")
    cols = DataValidator.validate_positive_int(cols, "cols")
    until = until or date.today()
    rng = random.Random(seed)

    create_new_datafile(path, random_header(cols, rng), logger)
    with open_datafile(path, logger) as diary:
        ids = [item.id for item in diary.get_header()]
        items = []
        for offset in range(rows - 1, -1, -1):
            day = until - timedelta(days=offset)
            items.append((day, [i for i in ids if rng.random() < 0.5]))
        diary.update_rows_batch(items)

    safe_logger(logger).log_operation(
        "diary_generated", {"path": str(path), "rows": rows, "cols": cols}
    )
