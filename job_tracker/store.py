"""SQLite storage for job applications."""

import logging
import sqlite3
from pathlib import Path
from typing import Optional, Union

from .errors import StorageError
from .models import JobApplication

logger = logging.getLogger(__name__)

MEMORY_DB = ":memory:"

COLUMNS = "id, description, date, status, url, notes"

# SQLite INTEGER is a signed 64-bit value
MIN_ID = -(2**63)
MAX_ID = 2**63 - 1


def _storable_id(job_id: int) -> bool:
    """Check that an id fits in a SQLite INTEGER column."""
    return MIN_ID <= job_id <= MAX_ID


class ApplicationStore:
    """Owns the job_applications table and every statement run against it."""

    def __init__(self, db_path: Union[str, Path] = MEMORY_DB):
        self.db_path = db_path
        self._conn: Optional[sqlite3.Connection] = None

    def open(self) -> "ApplicationStore":
        """Open the database connection, creating the file if needed."""
        if self._conn is not None:
            return self

        try:
            if str(self.db_path) != MEMORY_DB:
                Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(self.db_path)
        except (OSError, sqlite3.Error) as e:
            raise StorageError(f"Could not open database {self.db_path}: {e}") from e

        conn.row_factory = sqlite3.Row
        self._conn = conn
        logger.debug(f"Opened database {self.db_path}")
        return self

    def close(self) -> None:
        """Close the connection if it is open."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> "ApplicationStore":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def conn(self) -> sqlite3.Connection:
        """The open connection, or StorageError if the store is closed."""
        if self._conn is None:
            raise StorageError("Database is not open")
        return self._conn

    def _execute(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        """Run one write statement in its own transaction."""
        try:
            with self.conn:
                return self.conn.execute(sql, params)
        except sqlite3.Error as e:
            raise StorageError(str(e)) from e

    def _query(self, sql: str, params: tuple = ()) -> list[sqlite3.Row]:
        """Run one read statement and fetch every row."""
        try:
            return self.conn.execute(sql, params).fetchall()
        except sqlite3.Error as e:
            raise StorageError(str(e)) from e

    def create_schema(self) -> None:
        """Create the table if it does not exist yet."""
        self._execute("""
            CREATE TABLE IF NOT EXISTS job_applications (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                description TEXT NOT NULL,
                date TEXT NOT NULL,
                status TEXT NOT NULL,
                url TEXT,
                notes TEXT
            )
        """)
        logger.debug("Database schema ready")

    def insert(self, job: JobApplication) -> int:
        """Persist a new row and return its id."""
        cursor = self._execute(
            """
            INSERT INTO job_applications (description, date, status, url, notes)
            VALUES (?, ?, ?, ?, ?)
            """,
            (job.description, job.date, job.status, job.url, job.notes),
        )
        logger.debug(f"Inserted job application {cursor.lastrowid}")
        return cursor.lastrowid

    def get(self, job_id: int) -> Optional[JobApplication]:
        """Fetch one application, or None if the id does not exist."""
        if not _storable_id(job_id):
            return None
        rows = self._query(
            f"SELECT {COLUMNS} FROM job_applications WHERE id = ?", (job_id,)
        )
        if not rows:
            return None
        return JobApplication(**dict(rows[0]))

    def count(self) -> int:
        """Number of stored applications."""
        return self._query("SELECT COUNT(*) FROM job_applications")[0][0]

    def list(self) -> list[JobApplication]:
        """All applications ordered by id."""
        rows = self._query(f"SELECT {COLUMNS} FROM job_applications ORDER BY id ASC")
        return [JobApplication(**dict(row)) for row in rows]

    def update_status(self, job_id: int, status: str) -> bool:
        """Overwrite the status column. Returns False if the id does not exist."""
        if not _storable_id(job_id):
            return False
        cursor = self._execute(
            "UPDATE job_applications SET status = ? WHERE id = ?", (status, job_id)
        )
        return cursor.rowcount > 0

    def delete_one(self, job_id: int) -> bool:
        """Delete one row. Returns False if the id does not exist."""
        if not _storable_id(job_id):
            return False
        cursor = self._execute(
            "DELETE FROM job_applications WHERE id = ?", (job_id,)
        )
        return cursor.rowcount > 0

    def delete_all(self) -> int:
        """Delete every row and return how many were removed."""
        cursor = self._execute("DELETE FROM job_applications")
        logger.debug(f"Deleted {cursor.rowcount} job applications")
        return cursor.rowcount
