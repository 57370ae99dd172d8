"""
Core Models
------------

Tables of the relational diary.

Models:
    - info: Key/value metadata, including the schema version
    - Category: A trackable habit, visible or hidden
    - DateEntry: A date that was explicitly tracked

Categories are never deleted. Hiding one only flips its flag, so its id
and its history survive and reappear when it is unhidden.
"""
from __future__ import annotations

import datetime as dt

from sqlalchemy import Boolean, Column, Integer, Table, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, DayTimestamp, UnixTimestamp


def utc_now() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


# ----- Metadata -----
info = Table(
    "Info",
    Base.metadata,
    Column("name", Text, unique=True, nullable=False),
    Column("value", Text),
)


# ----- Category Model -----
class Category(Base):
    """
    A named habit tracked by the diary.

    Names are not unique; add/hide operations match them exactly.

    Attributes:
        category_id: Primary key, also the column order of the header
        name: Display name of the habit
        created_at: When the category was created
        hidden: Hidden categories are left out of every read path
    """

    __tablename__ = "Category"
    __table_args__ = {"sqlite_autoincrement": True}

    category_id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[dt.datetime] = mapped_column(
        UnixTimestamp, nullable=False, default=utc_now
    )
    hidden: Mapped[bool] = mapped_column(
        Boolean(create_constraint=False),
        nullable=False,
        default=False,
        server_default=text("0"),
    )

    def __repr__(self) -> str:
        return (
            f"<Category(id={self.category_id}, name='{self.name}', "
            f"hidden={self.hidden})>"
        )


# ----- Date Entry Model -----
class DateEntry(Base):
    """
    The record that a date was tracked, possibly with no active category.

    At most one row exists per date; writing a date replaces the row and
    all of its category links.

    Attributes:
        date: The tracked calendar date (primary key)
        created_at: When this row was written
    """

    __tablename__ = "DateEntry"

    date: Mapped[dt.date] = mapped_column(DayTimestamp, primary_key=True)
    created_at: Mapped[dt.datetime] = mapped_column(
        UnixTimestamp, nullable=False, default=utc_now
    )

    def __repr__(self) -> str:
        return f"<DateEntry(date={self.date})>"
