"""
Association Tables
-------------------

Many-to-many link between tracked dates and the categories active on them.
Rows are removed together with either parent.
"""
# --- Third party imports ---
from sqlalchemy import Column, ForeignKey, Integer, Table

# --- Local imports ---
from .base import Base, DayTimestamp

entry_to_categories = Table(
    "EntryToCategories",
    Base.metadata,
    Column(
        "date",
        DayTimestamp,
        ForeignKey("DateEntry.date", ondelete="CASCADE"),
        primary_key=True,
        nullable=False,
    ),
    Column(
        "category_id",
        Integer,
        ForeignKey("Category.category_id", ondelete="CASCADE"),
        primary_key=True,
        nullable=False,
    ),
)
