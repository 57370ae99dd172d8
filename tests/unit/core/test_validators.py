"""
Tests for DataValidator.
"""
import pytest
from datetime import date

from genee.core.exceptions import ValidationError
from genee.core.validators import DataValidator


class TestParseDate:
    """Tests for DataValidator.parse_date()."""

    def test_valid(self):
        assert DataValidator.parse_date("2023-02-04") == date(2023, 2, 4)

    def test_surrounding_whitespace(self):
        assert DataValidator.parse_date(" 2023-02-04 ") == date(2023, 2, 4)

    @pytest.mark.parametrize("value", ["04/02/2023", "2023-02-30", "", "today"])
    def test_invalid(self, value):
        with pytest.raises(ValidationError, match="expected YYYY-MM-DD"):
            DataValidator.parse_date(value)


class TestCategoryNames:
    """Tests for category name normalization."""

    def test_strips(self):
        assert DataValidator.normalize_category_name("  Reading ") == "Reading"

    @pytest.mark.parametrize("value", ["", "   ", None])
    def test_empty(self, value):
        with pytest.raises(ValidationError, match="cannot be empty"):
            DataValidator.normalize_category_name(value)

    def test_empty_list(self):
        with pytest.raises(ValidationError, match="At least one category"):
            DataValidator.normalize_category_names([])


class TestValidatePositiveInt:
    """Tests for DataValidator.validate_positive_int()."""

    def test_valid(self):
        assert DataValidator.validate_positive_int(3, "rows") == 3

    @pytest.mark.parametrize("value", [0, -1, True, "3", 2.5])
    def test_invalid(self, value):
        with pytest.raises(ValidationError, match="'rows'"):
            DataValidator.validate_positive_int(value, "rows")
