#!/usr/bin/env python3
"""
graphing.py
--------------------
Horizontal bar charts of habit counts for the terminal.

Each category gets one bar per period, the most recent period first.
Bars are scaled against the largest count of the whole chart and
colored by period.
"""
from __future__ import annotations

from typing import List, Sequence

import click

from genee.core.exceptions import ValidationError
from genee.datafile.base import HeaderItem

BLOCK = "▇"
EMPTY_BAR = "▏"
PERIOD_COLORS = ("green", "magenta", "yellow", "cyan", "red")
MIN_WIDTH = 10
LABEL_WIDTH = 8


def generate_rows(
    header: Sequence[HeaderItem],
    count_vectors: Sequence[Sequence[int]],
    max_width: int,
) -> str:
    """
    Render count vectors as bars, one line per category and period.

    Args:
        header: Visible categories, aligned with every count vector
        count_vectors: Counts per period, as from calculate_counts_per_range
        max_width: Total line width available, label included

    Returns:
        The chart, newline-terminated and styled with ANSI colors

    Raises:
        ValidationError: If max_width is too small, a count vector does not
            match the header, or there is nothing to draw
    """
    if max_width < MIN_WIDTH:
        raise ValidationError(f"Graph width must be at least {MIN_WIDTH}")
    if any(len(vector) != len(header) for vector in count_vectors):
        raise ValidationError("Input header length does not match count length")

    max_count = max((count for vector in count_vectors for count in vector), default=0)
    if max_count == 0:
        raise ValidationError("No input data")

    bar_width = max_width - LABEL_WIDTH
    lines: List[str] = []
    for name_index, item in enumerate(header):
        for period, vector in enumerate(count_vectors):
            if period == 0:
                head = click.style(f"{item.name[:3]:<3}", fg="blue", italic=True) + " "
            else:
                head = "    "

            count = vector[name_index]
            width = count * bar_width // max_count
            color = PERIOD_COLORS[period % len(PERIOD_COLORS)]
            if width == 0:
                bar = click.style(EMPTY_BAR, fg=color)
            else:
                bar = click.style(BLOCK * width, fg=color) + " "
            lines.append(head + bar + click.style(str(count), bold=True))
    return "\n".join(lines) + "\n"
