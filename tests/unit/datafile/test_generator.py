"""
test_generator.py
-----------------
Tests for random diary generation.
"""
import pytest
from datetime import date

from genee.core.exceptions import ValidationError
from genee.datafile import open_datafile
from genee.datafile.generator import generate_diary


class TestGenerateDiary:
    """Test generate_diary()."""

    @pytest.mark.parametrize("name", ["random.csv", "random.db"])
    def test_fills_consecutive_days(self, tmp_dir, name):
        path = tmp_dir / name

        generate_diary(path, rows=10, cols=4, until=date(2023, 3, 10), seed=1)

        with open_datafile(path) as diary:
            assert len(diary.get_header()) == 4
            assert diary.get_date_range() == (date(2023, 3, 1), date(2023, 3, 10))
            assert diary.get_missing_dates(None, date(2023, 3, 10)) == []

    def test_single_letter_headers(self, tmp_dir):
        path = tmp_dir / "random.csv"
        generate_diary(path, rows=1, cols=6, seed=3)

        with open_datafile(path) as diary:
            names = [item.name for item in diary.get_header()]
        assert all(len(name) == 1 and name.isupper() for name in names)

    def test_same_seed_same_data(self, tmp_dir):
        first, second = tmp_dir / "a.csv", tmp_dir / "b.csv"
        generate_diary(first, rows=20, cols=3, until=date(2023, 1, 20), seed=7)
        generate_diary(second, rows=20, cols=3, until=date(2023, 1, 20), seed=7)

        assert first.read_text(encoding="utf-8") == second.read_text(encoding="utf-8")

    @pytest.mark.parametrize("rows, cols", [(0, 3), (3, 0)])
    def test_rejects_non_positive_sizes(self, tmp_dir, rows, cols):
        path = tmp_dir / "random.csv"
        with pytest.raises(ValidationError):
            generate_diary(path, rows=rows, cols=cols)
        assert not path.exists()
