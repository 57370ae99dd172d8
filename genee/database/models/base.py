"""
Base Classes and Column Types
------------------------------

Foundational ORM classes for the relational diary.

Classes:
    - Base: Declarative base for all SQLAlchemy models
    - DayTimestamp: Calendar date stored as the Unix timestamp of its midnight (UTC)
    - UnixTimestamp: Datetime stored as whole Unix seconds

Dates and creation times are stored as integers so that databases written
by earlier releases of the diary keep working unchanged.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import calendar
from datetime import date, datetime, timezone
from typing import Any, Optional

# --- Third party ---
from sqlalchemy import Integer
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.types import TypeDecorator


# --- Base ORM class ---
class Base(DeclarativeBase):
    """
    Base class for all ORM models.

    Serves as the declarative base for SQLAlchemy models and provides
    access to the metadata object for table creation.
    """

    pass


def date_to_timestamp(value: date) -> int:
    """Unix timestamp of midnight UTC on the given date."""
    return calendar.timegm(value.timetuple()[:3] + (0, 0, 0))


def timestamp_to_date(value: int) -> date:
    """Calendar date of a Unix timestamp, interpreted in UTC."""
    return datetime.fromtimestamp(int(value), tz=timezone.utc).date()


class DayTimestamp(TypeDecorator):
    """Day-precision date persisted as an INTEGER Unix timestamp."""

    impl = Integer
    cache_ok = True

    def process_bind_param(self, value: Any, dialect) -> Optional[int]:
        if value is None:
            return None
        if isinstance(value, datetime):
            value = value.date()
        return date_to_timestamp(value)

    def process_result_value(self, value: Any, dialect) -> Optional[date]:
        if value is None:
            return None
        return timestamp_to_date(value)


class UnixTimestamp(TypeDecorator):
    """Timezone-aware datetime persisted as INTEGER Unix seconds."""

    impl = Integer
    cache_ok = True

    def process_bind_param(self, value: Any, dialect) -> Optional[int]:
        if value is None:
            return None
        return int(value.timestamp())

    def process_result_value(self, value: Any, dialect) -> Optional[datetime]:
        if value is None:
            return None
        return datetime.fromtimestamp(int(value), tz=timezone.utc)
