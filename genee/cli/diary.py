"""
Entry Commands
---------------

Recording and browsing diary rows.

Commands:
    - set: Record the active categories of a date
    - fill: Prompt for every untracked date up to today
    - missing: List untracked dates
    - list: Show the rows of recent days
    - range: Show the first and last tracked dates

Usage:
    # Record a day, replacing any previous record
    genee set 2024-03-01 Running Reading

    # Record a day with no habits done
    genee set 2024-03-02

    # Show the last week
    genee list --days 6
"""
from datetime import date, timedelta
from typing import List, Optional, Sequence

import click

from genee.core.cli_options import DATE, as_date, days_option, from_option, until_option
from genee.core.logging_manager import handle_cli_error
from genee.core.validators import DATE_FORMAT
from genee.datafile import HeaderItem, SuccessfulUpdate, resolve_category_ids
from . import DIARY_ERRORS, get_config, get_diary

UPDATE_MESSAGES = {
    SuccessfulUpdate.ADDED_NEW: "Added new entry",
    SuccessfulUpdate.REPLACED_EXISTING: "Replaced existing entry",
}


def split_names(text: str) -> List[str]:
    """Split a comma separated answer into category names."""
    return [part.strip() for part in text.split(",") if part.strip()]


def format_row(
    header: Sequence[HeaderItem], day: date, row: Optional[List[int]]
) -> str:
    """One table line: the date, then a mark per category."""
    if row is None:
        return f"{day.strftime(DATE_FORMAT)}  (not tracked)"
    active = set(row)
    marks = ["x" if item.id in active else "." for item in header]
    return f"{day.strftime(DATE_FORMAT)}  " + " ".join(f"{mark:<3}" for mark in marks).rstrip()


@click.command("set")
@click.argument("day", metavar="DATE", type=DATE)
@click.argument("categories", nargs=-1)
@click.pass_context
def set_row(ctx, day, categories):
    """Record CATEGORIES as the habits done on DATE."""
    day = as_date(day)
    try:
        diary = get_diary(ctx)
        ids = resolve_category_ids(diary.get_header(), categories)
        result = diary.update_row(day, ids)
        click.echo(f"✅ {UPDATE_MESSAGES[result]} for {day.strftime(DATE_FORMAT)}")

    except DIARY_ERRORS as e:
        handle_cli_error(ctx, e, "set", additional_context={"date": str(day)})


@click.command()
@until_option
@click.pass_context
def fill(ctx, until):
    """Prompt for every untracked date since the first entry."""
    until = as_date(until) or date.today()
    try:
        diary = get_diary(ctx)
        header = diary.get_header()
        missing_dates = diary.get_missing_dates(None, until)
        if not missing_dates:
            click.echo("Nothing to fill in")
            return

        click.echo("Categories: " + ", ".join(item.name for item in header))
        items = []
        for day in missing_dates:
            answer = click.prompt(
                f"{day.strftime(DATE_FORMAT)} (comma separated)",
                default="",
                show_default=False,
            )
            items.append((day, resolve_category_ids(header, split_names(answer))))

        results = diary.update_rows_batch(items)
        click.echo(f"✅ Recorded {len(results)} days")

    except DIARY_ERRORS as e:
        handle_cli_error(ctx, e, "fill")


@click.command()
@from_option
@until_option
@click.pass_context
def missing(ctx, start, until):
    """List untracked dates."""
    until = as_date(until) or date.today()
    try:
        dates = get_diary(ctx).get_missing_dates(as_date(start), until)
        if not dates:
            click.echo("No missing dates")
        for day in dates:
            click.echo(day.strftime(DATE_FORMAT))

    except DIARY_ERRORS as e:
        handle_cli_error(ctx, e, "missing")


@click.command("list")
@days_option(help_text="Number of previous days shown (default: from config)", minimum=0)
@until_option
@click.pass_context
def list_rows(ctx, days, until):
    """Show the rows of the last days, most recent first."""
    until = as_date(until) or date.today()
    if days is None:
        days = get_config(ctx).list_previous_days
    start = until - timedelta(days=days)
    try:
        diary = get_diary(ctx)
        header = diary.get_header()
        click.echo(" " * 12 + " ".join(f"{item.name[:3]:<3}" for item in header).rstrip())

        days_desc = [until - timedelta(days=offset) for offset in range(days + 1)]
        for day, row in zip(days_desc, diary.get_rows(start, until)):
            click.echo(format_row(header, day, row))

    except DIARY_ERRORS as e:
        handle_cli_error(ctx, e, "list")


@click.command("range")
@click.pass_context
def diary_range(ctx):
    """Show the first and last tracked dates."""
    try:
        first, last = get_diary(ctx).get_date_range()
        click.echo(f"{first.strftime(DATE_FORMAT)} .. {last.strftime(DATE_FORMAT)}")

    except DIARY_ERRORS as e:
        handle_cli_error(ctx, e, "range")
