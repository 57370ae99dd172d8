#!/usr/bin/env python3
"""
manager.py
--------------------
Relational diary backend.

Provides the SqliteDiary class, a DiaryDataConnection over a SQLite file.
Handles:
    - Backup of the file before anything else touches it
    - Schema version check and migration on open
    - Transactional row replacement, single and batched
    - Visible/hidden category management
    - Range counts, gap detection and frequency ranking

Notes
==============
- Dates are stored as Unix timestamps of their midnight in UTC
- Hidden categories are excluded from every read path
- Foreign keys are enforced on every connection
- Each public operation runs in its own transaction
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from contextlib import contextmanager
from datetime import date, datetime
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union

# --- Third party ---
from sqlalchemy import Engine, create_engine, delete, event, func, insert, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

# --- Local imports ---
from genee.core.backup_manager import BackupManager
from genee.core.exceptions import (
    DatabaseError,
    DataFileError,
    EmptyDiaryError,
    MigrationError,
    ValidationError,
)
from genee.core.logging_manager import GeneeLogger, safe_logger
from genee.core.validators import DataValidator
from genee.datafile.analytics import merge_missing_dates, rank_signatures
from genee.datafile.base import (
    AddCategoryResult,
    DateRange,
    DiaryDataConnection,
    HeaderItem,
    HideCategoryResult,
    RowUpdate,
    Signature,
    SuccessfulUpdate,
)
from genee.datafile.date_ranges import iter_days

from .decorators import handle_db_errors, log_database_operation
from .migrations import CURRENT_VERSION, migrate, set_schema_version
from .models import Base, Category, DateEntry, entry_to_categories, utc_now
from .query_analytics import QueryAnalytics


def build_engine(db_path: Path) -> Engine:
    """
    Create an engine for a SQLite diary file.

    Transactions are begun explicitly so that schema changes are part of
    them, and foreign keys are switched on for every new connection.
    """
    engine = create_engine(f"sqlite:///{db_path}", echo=False)

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _on_begin(connection):
        connection.exec_driver_sql("BEGIN")

    return engine


# ----- Relational Diary -----
class SqliteDiary(DiaryDataConnection):
    """
    Diary stored in a SQLite database.

    Attributes:
        db_path: Filesystem path to the database file
        logger: Optional logger for storage operations
        backup_manager: Manages the sibling .bak copy
        engine: SQLAlchemy engine instance
        SessionLocal: SQLAlchemy session factory
        schema_version: Schema version after opening

    Usage:
        with SqliteDiary(Path("diary.db")) as diary:
            diary.update_row(date.today(), [1, 3])
    """

    # ---- Initialization ----
    def __init__(
        self, db_path: Union[str, Path], logger: Optional[GeneeLogger] = None
    ) -> None:
        """
        Open an existing diary: back it up, then migrate it if needed.

        Args:
            db_path: Path to the SQLite file
            logger: Optional logger

        Raises:
            DatabaseError: If the file is missing or cannot be opened
            BackupError: If the backup copy cannot be written
            MigrationError: If upgrading the schema fails
        """
        self.db_path = Path(db_path).expanduser()
        self.logger = logger

        if not self.db_path.exists():
            raise DatabaseError(f"Cannot open the database at '{self.db_path}'")

        self.backup_manager = BackupManager(self.db_path, logger=self.logger)
        self.backup_manager.create_backup()

        self.query_analytics = QueryAnalytics(self.logger)
        self._setup_engine()
        self.schema_version = self._migrate()

    def _setup_engine(self) -> None:
        """Initialize database engine and session factory."""
        self.engine: Engine = build_engine(self.db_path)
        self.SessionLocal: sessionmaker = sessionmaker(
            bind=self.engine,
            autoflush=True,
            expire_on_commit=False,
        )
        safe_logger(self.logger).log_operation(
            "database_init_complete", {"db_path": str(self.db_path)}
        )

    def _migrate(self) -> int:
        try:
            with self.engine.begin() as connection:
                return migrate(connection, self.logger)
        except Exception as e:
            safe_logger(self.logger).log_error(
                e, {"operation": "migrate", "db_path": str(self.db_path)}
            )
            self.engine.dispose()
            raise MigrationError(f"Failed to migrate '{self.db_path}': {e}") from e

    def close(self) -> None:
        self.engine.dispose()

    # ---- Session Management ----
    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """
        Provide a transactional scope around a series of operations.

        Commits on success, rolls back on any exception.
        """
        session = self.SessionLocal()
        session_id = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        logger = safe_logger(self.logger)
        logger.log_debug("session_start", {"session_id": session_id})

        try:
            yield session
            session.commit()
            logger.log_debug("session_commit", {"session_id": session_id})
        except Exception as e:
            session.rollback()
            logger.log_error(
                e, {"operation": "session_rollback", "session_id": session_id}
            )
            raise
        finally:
            session.close()

    # ---- Helpers ----
    @staticmethod
    def _visible_ids(session: Session) -> List[int]:
        return list(
            session.scalars(
                select(Category.category_id)
                .where(Category.hidden.is_(False))
                .order_by(Category.category_id)
            )
        )

    @staticmethod
    def _categories_named(session: Session, name: str) -> List[Category]:
        return list(
            session.scalars(
                select(Category)
                .where(Category.name == name)
                .order_by(Category.category_id)
            )
        )

    # ---- Queries ----
    @handle_db_errors
    @log_database_operation("calculate_counts_per_range")
    def calculate_counts_per_range(
        self, date_ranges: Sequence[DateRange]
    ) -> List[List[int]]:
        with self.session_scope() as session:
            category_ids = self._visible_ids(session)
            result = []
            for first, second in date_ranges:
                counts = self.query_analytics.count_categories(
                    session, min(first, second), max(first, second)
                )
                result.append([counts.get(cid, 0) for cid in category_ids])
            return result

    @handle_db_errors
    @log_database_operation("get_missing_dates")
    def get_missing_dates(self, start: Optional[date], until: date) -> List[date]:
        with self.session_scope() as session:
            if start is None:
                start = session.scalar(select(func.min(DateEntry.date)))
                if start is None:
                    return []
            existing = self.query_analytics.tracked_dates(session, start, until)
        return merge_missing_dates(existing, start, until)

    @handle_db_errors
    def get_header(self) -> List[HeaderItem]:
        with self.session_scope() as session:
            rows = session.execute(
                select(Category.name, Category.category_id)
                .where(Category.hidden.is_(False))
                .order_by(Category.category_id)
            )
            return [HeaderItem(name, category_id) for name, category_id in rows]

    @handle_db_errors
    def get_row(self, day: date) -> Optional[List[int]]:
        with self.session_scope() as session:
            return self.query_analytics.rows_between(session, day, day).get(day)

    @handle_db_errors
    @log_database_operation("get_rows")
    def get_rows(self, start: date, until: date) -> List[Optional[List[int]]]:
        with self.session_scope() as session:
            rows = self.query_analytics.rows_between(session, start, until)
        return [rows.get(day) for day in reversed(list(iter_days(start, until)))]

    @handle_db_errors
    def is_empty(self) -> bool:
        with self.session_scope() as session:
            count = session.scalar(select(func.count()).select_from(DateEntry))
            return not count

    @handle_db_errors
    def get_date_range(self) -> Tuple[date, date]:
        with self.session_scope() as session:
            first, last = session.execute(
                select(func.min(DateEntry.date), func.max(DateEntry.date))
            ).one()
        if first is None:
            raise EmptyDiaryError("Diary is empty, no date range available")
        return first, last

    @handle_db_errors
    @log_database_operation("get_most_frequent_daily_data")
    def get_most_frequent_daily_data(
        self, start: Optional[date], until: date, limit: Optional[int] = None
    ) -> List[Tuple[Signature, int]]:
        with self.session_scope() as session:
            counts = self.query_analytics.count_daily_signatures(session, start, until)
        return rank_signatures(counts, limit)

    # ---- Mutations ----
    @handle_db_errors
    @log_database_operation("update_rows_batch")
    def update_rows_batch(self, items: Iterable[RowUpdate]) -> List[SuccessfulUpdate]:
        """
        Replace the rows of several dates in one transaction.

        For every date the existing links and date row are deleted and then
        written again. Ids must refer to existing categories, hidden ones
        included.

        Raises:
            ValidationError: If an item refers to an unknown category id;
                nothing is written in that case
        """
        with self.session_scope() as session:
            known_ids = set(session.scalars(select(Category.category_id)))
            now = utc_now()
            results = []
            for day, category_ids in items:
                ids = sorted(set(category_ids))
                unknown = [
                    i for i in ids if isinstance(i, bool) or i not in known_ids
                ]
                if unknown:
                    raise ValidationError(
                        f"Unknown category ids {unknown} for {day.isoformat()}"
                    )

                session.execute(
                    delete(entry_to_categories).where(entry_to_categories.c.date == day)
                )
                deleted = session.execute(
                    delete(DateEntry).where(DateEntry.date == day)
                ).rowcount
                session.execute(insert(DateEntry).values(date=day, created_at=now))
                if ids:
                    session.execute(
                        insert(entry_to_categories),
                        [{"date": day, "category_id": i} for i in ids],
                    )
                results.append(
                    SuccessfulUpdate.REPLACED_EXISTING
                    if deleted
                    else SuccessfulUpdate.ADDED_NEW
                )
            return results

    @handle_db_errors
    @log_database_operation("add_category")
    def add_category(self, name: str) -> AddCategoryResult:
        """
        Add a category by name.

        A visible category of that name makes this a no-op; otherwise the
        oldest hidden one is made visible again, keeping its history.
        """
        name = DataValidator.normalize_category_name(name)
        with self.session_scope() as session:
            categories = self._categories_named(session, name)
            if any(not category.hidden for category in categories):
                return AddCategoryResult.ALREADY_PRESENT
            if categories:
                categories[0].hidden = False
                return AddCategoryResult.UNHIDE
            session.add(Category(name=name, created_at=utc_now()))
            return AddCategoryResult.ADDED_NEW

    @handle_db_errors
    @log_database_operation("hide_category")
    def hide_category(self, name: str) -> HideCategoryResult:
        """Hide every visible category with that name."""
        name = DataValidator.normalize_category_name(name)
        with self.session_scope() as session:
            categories = self._categories_named(session, name)
            if not categories:
                return HideCategoryResult.NON_EXISTING_CATEGORY
            visible = [category for category in categories if not category.hidden]
            if not visible:
                return HideCategoryResult.ALREADY_HIDDEN
            for category in visible:
                category.hidden = True
            return HideCategoryResult.HIDDEN


def create_new_sqlite(
    db_path: Union[str, Path],
    headers: Sequence[str],
    logger: Optional[GeneeLogger] = None,
) -> None:
    """
    Create a new diary database at the current schema version.

    Raises:
        DataFileError: If a file already exists at db_path
        DatabaseError: If the schema cannot be created
    """
    db_path = Path(db_path).expanduser()
    if db_path.exists():
        raise DataFileError(f"A file already exists at '{db_path}'")

    engine = build_engine(db_path)
    try:
        with engine.begin() as connection:
            Base.metadata.create_all(connection)
            set_schema_version(connection, CURRENT_VERSION)
            now = utc_now()
            connection.execute(
                insert(Category),
                [{"name": name, "created_at": now, "hidden": False} for name in headers],
            )
    except SQLAlchemyError as e:
        safe_logger(logger).log_error(
            e, {"operation": "create_new_sqlite", "db_path": str(db_path)}
        )
        raise DatabaseError(f"Failed to create database at '{db_path}': {e}") from e
    finally:
        engine.dispose()

    safe_logger(logger).log_operation(
        "database_created", {"db_path": str(db_path), "categories": len(headers)}
    )
