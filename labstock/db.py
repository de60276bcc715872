"""Engine and session factories for the local storage database."""
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from labstock.core.config import DATABASE_URL

_SQLITE_PRAGMAS = (
    "PRAGMA journal_mode=WAL;",
    "PRAGMA synchronous=NORMAL;",
    "PRAGMA foreign_keys=ON;",
)


def _apply_sqlite_pragmas(dbapi_conn, _record) -> None:
    cursor = dbapi_conn.cursor()
    try:
        for pragma in _SQLITE_PRAGMAS:
            cursor.execute(pragma)
    finally:
        cursor.close()


def make_engine(url: str = DATABASE_URL) -> Engine:
    """SQLite engine with the storage pragmas set on every new connection."""
    engine = create_engine(url, connect_args={"check_same_thread": False}, future=True)
    event.listen(engine, "connect", _apply_sqlite_pragmas)
    return engine


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


# Process-wide defaults; nothing connects until the first session is used
engine = make_engine()
SessionLocal = make_session_factory(engine)


class Base(DeclarativeBase):
    pass
