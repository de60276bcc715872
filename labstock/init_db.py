"""Prepare the storage database: `python -m labstock.init_db`."""
import logging

from sqlalchemy.engine import Engine

from labstock.db import engine as default_engine
from labstock.db_migrations import run_migrations

log = logging.getLogger(__name__)


def init_db(engine: Engine = default_engine) -> str:
    """Create or upgrade the storage_slots table; returns the database path."""
    run_migrations(engine)
    log.info("Storage ready at %s", engine.url.database)
    return engine.url.database


if __name__ == "__main__":
    print(f"Storage slot table ready at -> {init_db()}")
