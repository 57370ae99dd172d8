"""
Analytics Commands
-------------------

Commands:
    - graph: Bar chart of category counts over consecutive periods
    - top: Most frequent combinations of habits
"""
from datetime import date

import click

from genee.core.cli_options import as_date, days_option, from_option, until_option
from genee.core.logging_manager import handle_cli_error
from genee.datafile import get_date_ranges
from genee.graphing import MIN_WIDTH, generate_rows
from . import DIARY_ERRORS, get_config, get_diary


@click.command()
@days_option(help_text="Days per period (default: from config)")
@click.option("--periods", type=click.IntRange(min=1), default=None, help="Number of periods")
@click.option("--width", type=click.IntRange(min=MIN_WIDTH), default=None, help="Chart width")
@until_option
@click.pass_context
def graph(ctx, days, periods, width, until):
    """Graph how often each habit was done, period by period."""
    config = get_config(ctx)
    until = as_date(until) or date.today()
    try:
        diary = get_diary(ctx)
        ranges = get_date_ranges(
            until, days or config.graph_days, periods or config.past_periods
        )
        counts = diary.calculate_counts_per_range(ranges)
        click.echo(
            generate_rows(diary.get_header(), counts, width or config.max_displayed_cols),
            nl=False,
        )

    except DIARY_ERRORS as e:
        handle_cli_error(ctx, e, "graph")


@click.command()
@from_option
@until_option
@click.option("--limit", type=click.IntRange(min=0), default=None, help="Number of combinations (default: from config)")
@click.pass_context
def top(ctx, start, until, limit):
    """Show the most frequent combinations of habits done on one day."""
    until = as_date(until) or date.today()
    if limit is None:
        limit = get_config(ctx).list_most_frequent_days
    try:
        diary = get_diary(ctx)
        names = {item.id: item.name for item in diary.get_header()}
        ranked = diary.get_most_frequent_daily_data(as_date(start), until, limit)
        if not ranked:
            click.echo("No tracked days")
        for signature, count in ranked:
            label = ", ".join(names[i] for i in signature) or "(nothing)"
            click.echo(f"{count:>5}  {label}")

    except DIARY_ERRORS as e:
        handle_cli_error(ctx, e, "top")
