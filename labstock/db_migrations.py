"""Schema migrations for older SQLite storage files."""
from __future__ import annotations

import logging

from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)


def _column_exists(conn, table: str, column: str) -> bool:
    rows = conn.exec_driver_sql(f"PRAGMA table_info({table})").fetchall()
    return any(row[1] == column for row in rows)


def _table_exists(conn, table: str) -> bool:
    row = conn.exec_driver_sql(
        "SELECT name FROM sqlite_master WHERE type='table' AND name=?",
        (table,),
    ).fetchone()
    return row is not None


def _ensure_column(conn, table: str, column: str, ddl: str) -> bool:
    if _column_exists(conn, table, column):
        return False
    log.debug("Adding column %s.%s", table, column)
    conn.exec_driver_sql(ddl)
    return True


def run_migrations(engine: Engine) -> None:
    """Bring the storage_slots table up to the current schema."""
    with engine.begin() as conn:
        if not _table_exists(conn, "storage_slots"):
            log.debug("Creating table storage_slots")
            conn.exec_driver_sql(
                """
                CREATE TABLE IF NOT EXISTS storage_slots (
                    key VARCHAR PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at DATETIME DEFAULT CURRENT_TIMESTAMP
                )
                """
            )
            return

        # First releases stored only key/value
        added_updated = _ensure_column(
            conn,
            "storage_slots",
            "updated_at",
            "ALTER TABLE storage_slots ADD COLUMN updated_at DATETIME",
        )
        if added_updated:
            conn.exec_driver_sql(
                "UPDATE storage_slots SET updated_at = COALESCE(updated_at, CURRENT_TIMESTAMP)"
            )
