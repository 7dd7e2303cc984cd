"""SQLAlchemy Core table definitions for the bookctl database.

A single ``books`` table. Stock can never go negative: the service layer
refuses such writes and the check constraint backs that up.
"""

from __future__ import annotations

from datetime import date

from sqlalchemy import CheckConstraint, Column, Date, Integer, MetaData, Table, Text

metadata = MetaData()

books = Table(
    "books",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("title", Text, nullable=False),
    Column("author", Text, nullable=False),
    Column("year", Date, nullable=False),
    Column("count", Integer, nullable=False, default=0, server_default="0"),
    CheckConstraint("count >= 0", name="ck_books_count_non_negative"),
    # AUTOINCREMENT keeps ids from being reused after the max row goes away.
    sqlite_autoincrement=True,
)

# Rows present on first initialization. Inserted only where the id is absent.
SEED_BOOKS: tuple[dict[str, object], ...] = (
    {"id": 1, "title": "Book 1", "author": "Author 1", "year": date(2020, 1, 1), "count": 10},
    {"id": 2, "title": "Book 2", "author": "Author 2", "year": date(2021, 5, 10), "count": 5},
)
