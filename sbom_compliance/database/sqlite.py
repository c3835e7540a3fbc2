"""
SQLite-backed check database.
Stores evaluated check records for one SBOM and serves them back in
insertion order for report generation.
"""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

from ..checks import CheckKind
from .base import CheckDatabase, CheckRecord

logger = logging.getLogger("sbom_compliance.database")


class SQLiteCheckDatabase(CheckDatabase):
    """
    Check store backed by SQLite.
    Features:
      - In-memory by default, or a file path for inspection after a run
      - Element enumeration in first-insertion order
      - Record order preserved per element (rowid order)
      - Usable as a context manager
    """

    def __init__(self, db_path: str | Path = ":memory:"):
        self.db_path = str(db_path)
        if self.db_path != ":memory:":
            Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
        self._conn = sqlite3.connect(self.db_path)
        self._init_db()

    def _init_db(self):
        """Initialize the check database schema."""
        with self._conn:
            self._conn.execute("""
                CREATE TABLE IF NOT EXISTS elements (
                    seq INTEGER PRIMARY KEY AUTOINCREMENT,
                    element_id TEXT NOT NULL UNIQUE
                )
            """)
            self._conn.execute("""
                CREATE TABLE IF NOT EXISTS check_records (
                    seq INTEGER PRIMARY KEY AUTOINCREMENT,
                    element_id TEXT NOT NULL,
                    check_kind TEXT NOT NULL,
                    result_value TEXT NOT NULL,
                    score REAL NOT NULL
                )
            """)
            self._conn.execute("""
                CREATE INDEX IF NOT EXISTS idx_records_element
                ON check_records(element_id, check_kind)
            """)

    def clear(self):
        """Drop every stored element and record."""
        with self._conn:
            self._conn.execute("DELETE FROM check_records")
            self._conn.execute("DELETE FROM elements")

    def add_element(self, element_id: str):
        with self._conn:
            self._conn.execute(
                "INSERT OR IGNORE INTO elements (element_id) VALUES (?)",
                (element_id,),
            )

    def add_record(self, record: CheckRecord):
        with self._conn:
            self._conn.execute(
                "INSERT OR IGNORE INTO elements (element_id) VALUES (?)",
                (record.element_id,),
            )
            self._conn.execute(
                """
                INSERT INTO check_records (element_id, check_kind, result_value, score)
                VALUES (?, ?, ?, ?)
                """,
                (record.element_id, record.check_kind.value, record.result_value, record.score),
            )
        logger.debug(f"Stored {record.check_kind.value} for element {record.element_id}")

    def all_element_ids(self) -> list[str]:
        rows = self._conn.execute(
            "SELECT element_id FROM elements ORDER BY seq"
        ).fetchall()
        return [r[0] for r in rows]

    def records_for(self, element_id: str) -> list[CheckRecord]:
        rows = self._conn.execute(
            """
            SELECT element_id, check_kind, result_value, score
            FROM check_records WHERE element_id = ?
            ORDER BY seq
            """,
            (element_id,),
        ).fetchall()
        return [self._to_record(r) for r in rows]

    def records_for_kind(self, kind: CheckKind, element_id: str) -> list[CheckRecord]:
        rows = self._conn.execute(
            """
            SELECT element_id, check_kind, result_value, score
            FROM check_records WHERE element_id = ? AND check_kind = ?
            ORDER BY seq
            """,
            (element_id, kind.value),
        ).fetchall()
        return [self._to_record(r) for r in rows]

    @staticmethod
    def _to_record(row) -> CheckRecord:
        return CheckRecord(
            element_id=row[0],
            check_kind=CheckKind(row[1]),
            result_value=row[2],
            score=row[3],
        )

    def close(self):
        self._conn.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
