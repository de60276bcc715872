from sqlalchemy import create_engine

from labstock.db import make_engine
from labstock.db_migrations import run_migrations
from labstock.init_db import init_db


def _get_columns(conn, table):
    return {row[1] for row in conn.exec_driver_sql(f"PRAGMA table_info({table})").fetchall()}


def _table_exists(conn, table):
    return conn.exec_driver_sql(
        "SELECT name FROM sqlite_master WHERE type='table' AND name=?",
        (table,),
    ).fetchone() is not None


def test_run_migrations_creates_slot_table():
    engine = create_engine("sqlite:///:memory:", future=True)
    run_migrations(engine)
    with engine.begin() as conn:
        assert _table_exists(conn, "storage_slots")
        assert {"key", "value", "updated_at"} == _get_columns(conn, "storage_slots")


def test_run_migrations_adds_updated_at_to_legacy_table():
    engine = create_engine("sqlite:///:memory:", future=True)
    with engine.begin() as conn:
        conn.exec_driver_sql(
            """
            CREATE TABLE storage_slots (
                key VARCHAR PRIMARY KEY,
                value TEXT NOT NULL
            )
            """
        )
        conn.exec_driver_sql("INSERT INTO storage_slots (key, value) VALUES ('labInventoryData', '[]')")

    run_migrations(engine)
    run_migrations(engine)

    with engine.begin() as conn:
        assert "updated_at" in _get_columns(conn, "storage_slots")
        value, updated = conn.exec_driver_sql("SELECT value, updated_at FROM storage_slots").one()
        assert value == "[]"
        assert updated is not None


def test_make_engine_sets_pragmas_on_connect():
    engine = make_engine("sqlite:///:memory:")
    with engine.connect() as conn:
        assert conn.exec_driver_sql("PRAGMA foreign_keys").scalar_one() == 1


def test_init_db_builds_slot_table_only(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path / 'init.sqlite3'}")
    path = init_db(engine)
    assert path.endswith("init.sqlite3")
    with engine.begin() as conn:
        tables = {row[0] for row in conn.exec_driver_sql("SELECT name FROM sqlite_master WHERE type='table'")}
        assert tables == {"storage_slots"}
        assert conn.exec_driver_sql("PRAGMA journal_mode").scalar_one() == "wal"
