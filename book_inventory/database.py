import logging
import sqlite3
from typing import List, Optional

from .book import Book
from .errors import StorageError

logger = logging.getLogger(__name__)


class InventoryDatabase:
    """Storage gateway for the ``inventory`` table.

    Holds a single SQLite connection for its whole lifetime. Every
    ``sqlite3.Error`` coming out of the engine is re-raised as ``StorageError``.
    """

    def __init__(self, conn: sqlite3.Connection, path: str) -> None:
        self.conn = conn
        self.path = path

    @classmethod
    def initialize(cls, path: str) -> "InventoryDatabase":
        """Open (or create) the database file at ``path`` and ensure the table exists."""
        try:
            conn = sqlite3.connect(path)
        except sqlite3.Error as e:
            raise StorageError(f"Could not open database {path}: {e}") from e
        conn.row_factory = sqlite3.Row

        db = cls(conn, path)
        try:
            db.create_tables()
        except StorageError:
            conn.close()
            raise
        logger.info(f"Inventory database opened at {path}")
        return db

    def create_tables(self) -> None:
        """Create the inventory table if it doesn't exist."""
        self._execute("""
            CREATE TABLE IF NOT EXISTS inventory (
                id INTEGER PRIMARY KEY,
                title TEXT NOT NULL,
                author TEXT NOT NULL,
                year INTEGER NOT NULL,
                genre TEXT NOT NULL
            )
        """)

    # ------------------------- Core operations ------------------------- #
    def add(self, title: str, author: str, year: int, genre: str) -> int:
        """Insert a new book and return the id assigned by the store."""
        cursor = self._execute(
            "INSERT INTO inventory (title, author, year, genre) VALUES (?, ?, ?, ?)",
            (title, author, year, genre),
        )
        logger.info(f"Book added: id={cursor.lastrowid}, title={title!r}")
        return cursor.lastrowid

    def list(self) -> List[Book]:
        rows = self._query_all("SELECT id, title, author, year, genre FROM inventory")
        return [Book.from_dict(row) for row in rows]

    def find(self, book_id: int) -> Optional[Book]:
        row = self._query_one(
            "SELECT id, title, author, year, genre FROM inventory WHERE id = ?",
            (book_id,),
        )
        return Book.from_dict(row) if row else None

    def update(self, book_id: int, title: str, author: str, year: int, genre: str) -> None:
        """Overwrite every field of the book with ``book_id``.

        Updating an id that doesn't exist is not an error; nothing changes.
        """
        cursor = self._execute(
            "UPDATE inventory SET title = ?, author = ?, year = ?, genre = ? WHERE id = ?",
            (title, author, year, genre, book_id),
        )
        if cursor.rowcount == 0:
            logger.debug(f"Update matched no book with id={book_id}")
        else:
            logger.info(f"Book updated: id={book_id}")

    def remove(self, book_id: int) -> None:
        """Delete the book with ``book_id``; a missing id is silently ignored."""
        cursor = self._execute("DELETE FROM inventory WHERE id = ?", (book_id,))
        if cursor.rowcount == 0:
            logger.debug(f"Remove matched no book with id={book_id}")
        else:
            logger.info(f"Book removed: id={book_id}")

    def close(self) -> None:
        self.conn.close()

    def __enter__(self) -> "InventoryDatabase":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ------------------------- Persistence ------------------------- #
    def _execute(self, sql: str, params=()) -> sqlite3.Cursor:
        """Run one statement and commit it."""
        try:
            cursor = self.conn.execute(sql, params)
            self.conn.commit()
        except sqlite3.Error as e:
            raise StorageError(f"Database error: {e}") from e
        return cursor

    def _query_all(self, sql: str, params=()) -> List[sqlite3.Row]:
        try:
            return self.conn.execute(sql, params).fetchall()
        except sqlite3.Error as e:
            raise StorageError(f"Database error: {e}") from e

    def _query_one(self, sql: str, params=()) -> Optional[sqlite3.Row]:
        try:
            return self.conn.execute(sql, params).fetchone()
        except sqlite3.Error as e:
            raise StorageError(f"Database error: {e}") from e
