"""SQLite database engine and schema via SQLAlchemy Core."""

from bookctl.infrastructure.database.engine import create_db_engine, init_database
from bookctl.infrastructure.database.schema import SEED_BOOKS, books, metadata

__all__ = [
    "SEED_BOOKS",
    "books",
    "create_db_engine",
    "init_database",
    "metadata",
]
