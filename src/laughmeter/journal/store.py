"""SQLite storage for journal entries."""

import sqlite3
from datetime import datetime
from pathlib import Path
from typing import Any

from .models import DEFAULT_MOOD, Entry

# Fields that may change after an entry is logged.
EDITABLE_FIELDS = ("mood", "person", "note")


class EntryStore:
    """Persistent storage for laugh entries using SQLite.

    Entries are append-only apart from edits to their mood, person and
    note. Reads always return the full history, newest first.
    """

    def __init__(self, db_path: Path) -> None:
        """Initialize the store with a database path.

        Args:
            db_path: Path to the SQLite database file.
        """
        self.db_path = db_path
        self._conn: sqlite3.Connection | None = None

    def _get_connection(self) -> sqlite3.Connection:
        """Get or create the database connection."""
        if self._conn is None:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            self._conn = sqlite3.connect(self.db_path)
            self._conn.row_factory = sqlite3.Row
        return self._conn

    def init_db(self) -> None:
        """Create the entries table if it doesn't exist."""
        conn = self._get_connection()
        conn.execute("""
            CREATE TABLE IF NOT EXISTS entries (
                id          TEXT PRIMARY KEY,
                timestamp   TEXT NOT NULL,
                epoch       REAL NOT NULL,
                mood        TEXT NOT NULL DEFAULT 'smile',
                person      TEXT,
                location    TEXT,
                note        TEXT
            )
        """)
        conn.execute("CREATE INDEX IF NOT EXISTS idx_entries_epoch ON entries(epoch)")
        conn.commit()

    def append(self, entry: Entry) -> str:
        """Store a new entry.

        Args:
            entry: The entry to store.

        Returns:
            The id of the stored entry.
        """
        conn = self._get_connection()
        conn.execute(
            """
            INSERT INTO entries (id, timestamp, epoch, mood, person, location, note)
            VALUES (?, ?, ?, ?, ?, ?, ?)
            """,
            (
                entry.id,
                entry.timestamp.isoformat(),
                entry.timestamp.timestamp(),
                entry.mood or DEFAULT_MOOD,
                entry.person,
                entry.location,
                entry.note,
            ),
        )
        conn.commit()
        return entry.id

    def get(self, entry_id: str) -> Entry | None:
        """Get a single entry by id."""
        conn = self._get_connection()
        cursor = conn.execute(
            "SELECT id, timestamp, mood, person, location, note FROM entries WHERE id = ?",
            (entry_id,),
        )
        row = cursor.fetchone()
        return self._row_to_entry(row) if row else None

    def update(self, entry_id: str, **fields: Any) -> bool:
        """Change the editable fields of an entry.

        Args:
            entry_id: The id of the entry to change.
            **fields: New values for any of mood, person and note.

        Returns:
            True if an entry was updated, False if none has that id.

        Raises:
            ValueError: If a field other than mood, person or note is given.
        """
        unknown = set(fields) - set(EDITABLE_FIELDS)
        if unknown:
            raise ValueError(f"Cannot edit field(s): {', '.join(sorted(unknown))}")
        if not fields:
            return self.get(entry_id) is not None

        columns = [name for name in EDITABLE_FIELDS if name in fields]
        assignments = ", ".join(f"{name} = ?" for name in columns)
        values = [fields[name] for name in columns]
        if "mood" in fields and not fields["mood"]:
            values[columns.index("mood")] = DEFAULT_MOOD

        conn = self._get_connection()
        cursor = conn.execute(
            f"UPDATE entries SET {assignments} WHERE id = ?",
            (*values, entry_id),
        )
        conn.commit()
        return cursor.rowcount > 0

    def delete(self, entry_id: str) -> bool:
        """Delete an entry by its id.

        Returns:
            True if an entry was deleted, False otherwise.
        """
        conn = self._get_connection()
        cursor = conn.execute("DELETE FROM entries WHERE id = ?", (entry_id,))
        conn.commit()
        return cursor.rowcount > 0

    def list_all(self) -> list[Entry]:
        """Get every entry, newest first."""
        conn = self._get_connection()
        cursor = conn.execute(
            """
            SELECT id, timestamp, mood, person, location, note FROM entries
            ORDER BY epoch DESC, rowid DESC
            """
        )
        return [self._row_to_entry(row) for row in cursor.fetchall()]

    def count(self) -> int:
        """Number of stored entries."""
        conn = self._get_connection()
        return conn.execute("SELECT COUNT(*) FROM entries").fetchone()[0]

    def close(self) -> None:
        """Close the database connection."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def _row_to_entry(self, row: sqlite3.Row) -> Entry:
        """Convert a database row to an Entry."""
        return Entry(
            id=row["id"],
            timestamp=datetime.fromisoformat(row["timestamp"]),
            mood=row["mood"],
            person=row["person"],
            location=row["location"],
            note=row["note"],
        )
