"""
SQLite Database Repository - Review and Dictionary Persistence
===============================================================

Two stores, two database files:
- review.db      review(review_id INTEGER PRIMARY KEY, review TEXT)
- dictionary.db  dictionary(keyword TEXT)

Every operation opens its own connection, so a store instance can be
shared by all request threads. Writers are serialised by SQLite itself
(BEGIN IMMEDIATE + busy timeout); there is no in-process lock.
"""

import sqlite3
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Tuple
from contextlib import contextmanager

from ...domain import Review, StoreError
from .base import DictionaryStore, ReviewStore

logger = logging.getLogger(__name__)

REVIEW_DATABASE_FILE = "./db/review.db"
DICTIONARY_DATABASE_FILE = "./db/dictionary.db"

REVIEW_INIT_STATEMENT = """
    CREATE TABLE IF NOT EXISTS
    review (
        review_id INTEGER PRIMARY KEY,
        review TEXT
    )
"""

DICTIONARY_INIT_STATEMENT = """
    CREATE TABLE IF NOT EXISTS
    dictionary (
        keyword TEXT
    )
"""


class SQLiteDatabase:
    """
    Connection handling shared by the SQLite stores.

    Connections run in autocommit mode; writes open an explicit
    transaction through _transaction(). Any sqlite3 error raised while a
    connection is open is re-raised as StoreError.
    """

    def __init__(self, db_path: str, init_statement: str, timeout: float = 5.0):
        self.db_path = db_path
        self.init_statement = init_statement
        self.timeout = timeout

    @contextmanager
    def _get_connection(self):
        """Get database connection with context manager."""
        try:
            conn = sqlite3.connect(self.db_path, timeout=self.timeout, isolation_level=None)
        except sqlite3.Error as e:
            raise StoreError(f"{self.db_path}: {e}") from e
        conn.row_factory = sqlite3.Row
        try:
            yield conn
        except sqlite3.Error as e:
            raise StoreError(str(e)) from e
        finally:
            conn.close()

    @contextmanager
    def _transaction(self):
        """BEGIN IMMEDIATE ... COMMIT, rolled back if the body raises."""
        with self._get_connection() as conn:
            conn.execute("BEGIN IMMEDIATE")
            try:
                yield conn
            except BaseException:
                if conn.in_transaction:
                    conn.execute("ROLLBACK")
                raise
            conn.execute("COMMIT")

    def init(self):
        """Create the parent directory and the table, switch to WAL."""
        if self.db_path != ":memory:":
            try:
                Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise StoreError(f"Cannot create database directory: {e}") from e

        with self._get_connection() as conn:
            # Readers never block on a writer in WAL mode
            conn.execute("PRAGMA journal_mode=WAL")
            conn.execute(self.init_statement)

        logger.info(f"Database initialized: {self.db_path}")
        return self


class SQLiteReviewStore(SQLiteDatabase, ReviewStore):
    """
    SQLite-backed review store.

    Usage:
        store = SQLiteReviewStore("./db/review.db").init()
        store.get_by_id(8888)
        store.search_by_keyword("tiramisu")
    """

    LIST_STATEMENT = "SELECT review_id, review FROM review ORDER BY review_id"
    GET_STATEMENT = "SELECT review_id, review FROM review WHERE review_id = ?"
    # instr() is case-sensitive and has no wildcard characters, unlike LIKE.
    # No index can serve it: every search is a full scan, O(rows * length).
    SEARCH_STATEMENT = (
        "SELECT review_id, review FROM review WHERE instr(review, ?) > 0 ORDER BY review_id"
    )
    UPDATE_STATEMENT = "UPDATE review SET review = ? WHERE review_id = ?"

    def __init__(
        self,
        db_path: str = REVIEW_DATABASE_FILE,
        timeout: float = 5.0,
        init_statement: str = REVIEW_INIT_STATEMENT,
    ):
        super().__init__(db_path, init_statement, timeout)

    def list_all(self) -> List[Review]:
        with self._get_connection() as conn:
            rows = conn.execute(self.LIST_STATEMENT).fetchall()
            return [self._row_to_review(row) for row in rows]

    def get_by_id(self, review_id: int) -> Optional[Review]:
        with self._get_connection() as conn:
            row = conn.execute(self.GET_STATEMENT, (review_id,)).fetchone()
            return self._row_to_review(row) if row else None

    def search_by_keyword(self, keyword: str) -> List[Review]:
        # keyword is always a bound parameter, never part of the SQL text
        with self._get_connection() as conn:
            rows = conn.execute(self.SEARCH_STATEMENT, (keyword,)).fetchall()
            return [self._row_to_review(row, keyword=keyword) for row in rows]

    def update(self, review_id: int, content: str) -> int:
        with self._transaction() as conn:
            cursor = conn.cursor()
            cursor.execute(self.UPDATE_STATEMENT, (content, review_id))
            affected = cursor.rowcount

        logger.debug(f"Updated review {review_id}: {affected} row(s)")
        return affected

    # ── Seeding ────────────────────────────────────────────────────

    def add_reviews(self, reviews: Iterable[Tuple[Optional[int], str]]) -> int:
        """
        Insert reviews in one transaction.

        Args:
            reviews: (review_id, content) pairs. A None id lets SQLite assign one.

        Returns:
            Number of rows inserted (rows whose id already exists are skipped).
        """
        added = 0
        with self._transaction() as conn:
            for review_id, content in reviews:
                if review_id is None:
                    cursor = conn.execute("INSERT INTO review (review) VALUES (?)", (content,))
                else:
                    cursor = conn.execute(
                        "INSERT OR IGNORE INTO review (review_id, review) VALUES (?, ?)",
                        (review_id, content),
                    )
                added += cursor.rowcount

        logger.info(f"Added {added} reviews to {self.db_path}")
        return added

    def count(self) -> int:
        with self._get_connection() as conn:
            return conn.execute("SELECT COUNT(*) FROM review").fetchone()[0]

    def _row_to_review(self, row: sqlite3.Row, keyword: Optional[str] = None) -> Review:
        """Convert database row to Review object."""
        return Review(
            id=row["review_id"],
            content=row["review"] or "",
            keyword=keyword,
        )


class SQLiteDictionaryStore(SQLiteDatabase, DictionaryStore):
    """SQLite-backed keyword dictionary."""

    EXISTS_STATEMENT = "SELECT keyword FROM dictionary WHERE keyword = ?"

    def __init__(
        self,
        db_path: str = DICTIONARY_DATABASE_FILE,
        timeout: float = 5.0,
        init_statement: str = DICTIONARY_INIT_STATEMENT,
    ):
        super().__init__(db_path, init_statement, timeout)

    def exists(self, keyword: str) -> bool:
        with self._get_connection() as conn:
            row = conn.execute(self.EXISTS_STATEMENT, (keyword,)).fetchone()
            return row is not None

    def add_keywords(self, keywords: Iterable[str]) -> int:
        """Insert keywords not already present, in one transaction. Returns count added."""
        added = 0
        with self._transaction() as conn:
            for keyword in keywords:
                cursor = conn.execute(
                    "INSERT INTO dictionary (keyword) "
                    "SELECT ? WHERE NOT EXISTS (SELECT 1 FROM dictionary WHERE keyword = ?)",
                    (keyword, keyword),
                )
                added += cursor.rowcount

        logger.info(f"Added {added} keywords to {self.db_path}")
        return added

    def count(self) -> int:
        with self._get_connection() as conn:
            return conn.execute("SELECT COUNT(*) FROM dictionary").fetchone()[0]
