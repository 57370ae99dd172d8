"""
Models of the relational diary.

Exports:
    Base, DayTimestamp, UnixTimestamp: ORM base and column types
    info, Category, DateEntry: Tables
    entry_to_categories: Association table
"""
from .base import (
    Base,
    DayTimestamp,
    UnixTimestamp,
    date_to_timestamp,
    timestamp_to_date,
)
from .associations import entry_to_categories
from .core import Category, DateEntry, info, utc_now

__all__ = [
    "Base",
    "DayTimestamp",
    "UnixTimestamp",
    "date_to_timestamp",
    "timestamp_to_date",
    "entry_to_categories",
    "info",
    "Category",
    "DateEntry",
    "utc_now",
]
