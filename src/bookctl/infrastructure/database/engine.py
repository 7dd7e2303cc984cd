"""Database engine setup for SQLite.

The DB is stored at ``{store_root}/.bookctl/bookctl.db`` unless the
``[database] path`` setting (or ``--db``) points elsewhere.

SQLAlchemy Core (not ORM) is used because bookctl is a short-lived
CLI process that touches one table.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from sqlalchemy import create_engine, event, insert, select
from sqlalchemy.engine import Engine

from bookctl.infrastructure.database.schema import SEED_BOOKS, books, metadata

logger = logging.getLogger(__name__)


def create_db_engine(db_path: Path, *, echo: bool = False) -> Engine:
    """Create a SQLite engine with WAL mode enabled."""
    engine = create_engine(f"sqlite:///{db_path}", echo=echo)

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    return engine


def init_database(db_path: Path, *, echo: bool = False) -> Engine:
    """Initialize the bookctl database at *db_path*.

    Creates the parent directory, the ``books`` table, and the seed rows.
    Idempotent. Safe to call on an existing database: seeding never
    touches rows that already exist.

    Returns the engine ready for use.
    """
    db_path.parent.mkdir(parents=True, exist_ok=True)
    engine = create_db_engine(db_path, echo=echo)
    metadata.create_all(engine)
    seeded = _seed_books(engine)
    logger.debug("Database ready at %s (seeded %d rows)", db_path, seeded)
    return engine


def _seed_books(engine: Engine) -> int:
    """Insert seed rows whose ids are not yet present. Returns rows inserted."""
    inserted = 0
    with engine.begin() as conn:
        for row in SEED_BOOKS:
            existing = conn.execute(select(books.c.id).where(books.c.id == row["id"])).first()
            if existing is None:
                conn.execute(insert(books).values(**row))
                inserted += 1
    return inserted
