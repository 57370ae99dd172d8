#!/usr/bin/env python3
"""
cli_options.py
-------------------
Reusable Click option decorators for consistent CLI interfaces.

Usage:
    from genee.core.cli_options import until_option, days_option

    @cli.command()
    @until_option
    @days_option(default=7)
    def my_command(until, days):
        pass
"""
from datetime import date, datetime
from typing import Optional

import click

from genee.core.validators import DATE_FORMAT


DATE = click.DateTime(formats=[DATE_FORMAT])
"""Click parameter type for diary dates (YYYY-MM-DD)."""


def as_date(value: Optional[datetime]) -> Optional[date]:
    """Convert a parsed DATE parameter to a date."""
    return value.date() if value is not None else None


# ═══════════════════════════════════════════════════════════════════════════
# DATE OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

until_option = click.option(
    "--until",
    type=DATE,
    default=None,
    help="Last date considered (default: today)",
)

from_option = click.option(
    "--from",
    "start",
    type=DATE,
    default=None,
    help="First date considered (default: earliest entry)",
)


# ═══════════════════════════════════════════════════════════════════════════
# COUNT OPTIONS (FACTORIES)
# ═══════════════════════════════════════════════════════════════════════════

def days_option(help_text: str = "Number of days", minimum: int = 1):
    """
    Factory for a day-count option whose default comes from the config.

    Args:
        help_text: Help text of the option
        minimum: Smallest accepted value

    Returns:
        Click option decorator
    """
    return click.option(
        "--days",
        type=click.IntRange(min=minimum),
        default=None,
        help=help_text,
    )
