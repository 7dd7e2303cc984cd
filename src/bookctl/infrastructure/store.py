"""Store: repository over the ``books`` table.

The Store is the single dependency injected into every service. It owns
the database engine. Reads go through :meth:`Store.list_books`; writes go
through :meth:`Store.transaction`, which commits on success and rolls
back on any exception so a mutation is either fully saved or not at all.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING

from sqlalchemy import select, update

from bookctl.domain.books import Book
from bookctl.infrastructure.database.engine import init_database
from bookctl.infrastructure.database.schema import books

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from sqlalchemy import Connection, Row
    from sqlalchemy.engine import Engine

    from bookctl.config.settings import BookSettings

logger = logging.getLogger(__name__)


def _row_to_book(row: Row) -> Book:
    return Book(id=row.id, title=row.title, author=row.author, year=row.year, count=row.count)


@dataclass
class StoreTransaction:
    """Active write transaction. Yielded by :meth:`Store.transaction`."""

    conn: Connection

    def get_book(self, book_id: int) -> Book | None:
        """Fetch one book by id, or None."""
        row = self.conn.execute(select(books).where(books.c.id == book_id)).first()
        return _row_to_book(row) if row is not None else None

    def book_ids(self) -> list[int]:
        """All book ids in ascending order."""
        rows = self.conn.execute(select(books.c.id).order_by(books.c.id)).fetchall()
        return [r.id for r in rows]

    def set_count(self, book_id: int, count: int) -> None:
        """Overwrite the stock count for *book_id*.

        Raises:
            ValueError: If *count* is negative.
        """
        if count < 0:
            msg = f"Stock count cannot be negative (book {book_id}, count {count})"
            raise ValueError(msg)
        self.conn.execute(update(books).where(books.c.id == book_id).values(count=count))


class Store:
    """Repository encapsulating database access for the book inventory.

    Constructed lazily by the CLI context from :class:`BookSettings`.
    Services receive the Store via their :class:`BaseService` constructor.
    """

    def __init__(self, settings: BookSettings) -> None:
        self._settings = settings
        self._engine: Engine = init_database(
            settings.database_path, echo=settings.database.echo
        )

    @property
    def root(self) -> Path:
        """The store root directory."""
        return self._settings.store_root

    @property
    def engine(self) -> Engine:
        """The underlying SQLAlchemy engine."""
        return self._engine

    @property
    def settings(self) -> BookSettings:
        """The resolved settings for this store."""
        return self._settings

    def list_books(self) -> list[Book]:
        """Every book in ascending id order."""
        with self._engine.connect() as conn:
            rows = conn.execute(select(books).order_by(books.c.id)).fetchall()
        return [_row_to_book(r) for r in rows]

    @contextmanager
    def transaction(self) -> Iterator[StoreTransaction]:
        """Write transaction with auto-commit on success, rollback on failure.

        Usage::

            with store.transaction() as txn:
                book = txn.get_book(1)
                txn.set_count(book.id, book.count - 1)
        """
        with self._engine.begin() as conn:
            yield StoreTransaction(conn=conn)

    def close(self) -> None:
        """Release pooled connections."""
        logger.debug("Disposing engine for %s", self._settings.database_path)
        self._engine.dispose()
