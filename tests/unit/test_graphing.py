"""
test_graphing.py
----------------
Unit tests for the terminal bar chart.
"""
import click
import pytest

from genee.core.exceptions import ValidationError
from genee.datafile import HeaderItem
from genee.graphing import generate_rows

HEADER = [HeaderItem("Running", 1), HeaderItem("B", 2)]


class TestGenerateRows:
    """Test generate_rows()."""

    def test_bars_scaled_to_largest_count(self):
        """One line per category and period, labels on the first period."""
        output = generate_rows(HEADER, [[4, 0], [2, 1]], max_width=12)

        assert click.unstyle(output).splitlines() == [
            "Run ▇▇▇▇ 4",
            "    ▇▇ 2",
            "B   ▏0",
            "    ▇ 1",
        ]
        assert output.endswith("\n")

    def test_output_is_colored(self):
        output = generate_rows(HEADER, [[1, 1]], max_width=20)
        assert output != click.unstyle(output)

    def test_width_too_small(self):
        with pytest.raises(ValidationError, match="at least 10"):
            generate_rows(HEADER, [[1, 1]], max_width=9)

    def test_header_mismatch(self):
        with pytest.raises(ValidationError, match="does not match"):
            generate_rows(HEADER, [[1, 1, 1]], max_width=20)

    @pytest.mark.parametrize("counts", [[], [[0, 0], [0, 0]]])
    def test_no_data(self, counts):
        with pytest.raises(ValidationError, match="No input data"):
            generate_rows(HEADER, counts, max_width=20)
