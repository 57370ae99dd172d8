#!/usr/bin/env python3
"""
query_analytics.py
------------------
Aggregate queries over the relational diary.

All queries see visible categories only: links to hidden categories are
filtered out, while the dates themselves stay tracked.
"""
from collections import Counter
from datetime import date
from typing import Dict, List, Optional

from sqlalchemy import Select, Subquery, func, select
from sqlalchemy.orm import Session

from genee.core.logging_manager import GeneeLogger
from genee.datafile.base import Signature

from .decorators import handle_db_errors, log_database_operation
from .models import Category, DateEntry, entry_to_categories


def _visible_links() -> Subquery:
    """(date, category_id) links whose category is not hidden."""
    return (
        select(entry_to_categories.c.date, entry_to_categories.c.category_id)
        .join(Category, Category.category_id == entry_to_categories.c.category_id)
        .where(Category.hidden.is_(False))
        .subquery("visible_links")
    )


def _within(stmt: Select, column, start: Optional[date], until: date) -> Select:
    if start is not None:
        stmt = stmt.where(column >= start)
    return stmt.where(column <= until)


def parse_signature(value: Optional[str]) -> Signature:
    """Turn a group_concat of category ids into a sorted tuple."""
    if not value:
        return ()
    return tuple(sorted(int(part) for part in str(value).split(",")))


class QueryAnalytics:
    """
    Handles the counting and frequency queries of the diary.

    Every method takes the session to run in, so callers decide the
    transactional scope.
    """

    def __init__(self, logger: Optional[GeneeLogger] = None) -> None:
        self.logger = logger

    @handle_db_errors
    @log_database_operation("count_categories")
    def count_categories(
        self, session: Session, start: date, until: date
    ) -> Dict[int, int]:
        """
        Occurrences of each visible category in an inclusive range.

        Categories without any occurrence are absent from the result.
        """
        links = _visible_links()
        stmt = _within(
            select(links.c.category_id, func.count()).group_by(links.c.category_id),
            links.c.date,
            start,
            until,
        )
        return {category_id: count for category_id, count in session.execute(stmt)}

    @handle_db_errors
    def tracked_dates(
        self, session: Session, start: Optional[date], until: date
    ) -> List[date]:
        """Tracked dates in a range, ascending."""
        stmt = _within(select(DateEntry.date), DateEntry.date, start, until)
        return list(session.scalars(stmt.order_by(DateEntry.date)))

    @handle_db_errors
    def rows_between(
        self, session: Session, start: date, until: date
    ) -> Dict[date, List[int]]:
        """
        Visible active ids of every tracked date in an inclusive range.

        Tracked dates without any visible link map to an empty list.
        """
        rows: Dict[date, List[int]] = {
            day: [] for day in self.tracked_dates(session, start, until)
        }
        links = _visible_links()
        stmt = _within(
            select(links.c.date, links.c.category_id), links.c.date, start, until
        ).order_by(links.c.date, links.c.category_id)
        for day, category_id in session.execute(stmt):
            rows.setdefault(day, []).append(category_id)
        return rows

    @handle_db_errors
    @log_database_operation("count_daily_signatures")
    def count_daily_signatures(
        self, session: Session, start: Optional[date], until: date
    ) -> Counter:
        """
        Count how many tracked dates share each set of active categories.

        Each date is outer-joined to its visible links so that dates with
        nothing active count towards the empty signature.
        """
        links = _visible_links()
        per_day = _within(
            select(
                DateEntry.date,
                func.group_concat(links.c.category_id).label("signature"),
            )
            .outerjoin(links, links.c.date == DateEntry.date)
            .group_by(DateEntry.date),
            DateEntry.date,
            start,
            until,
        ).subquery("per_day")

        stmt = select(per_day.c.signature, func.count()).group_by(per_day.c.signature)
        counts: Counter = Counter()
        # group_concat order is unspecified, so equal sets may arrive as
        # different strings
        for value, occurrences in session.execute(stmt):
            counts[parse_signature(value)] += occurrences
        return counts
