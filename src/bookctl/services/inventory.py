"""InventoryService: listing, purchase, and restock of books.

Each public method validates its raw flag values first, then touches the
store. Mutations run in a single transaction, so a failed operation
leaves stock unchanged.
"""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from bookctl.domain.books import apply_filters, build_predicates, sort_books
from bookctl.domain.flags import parse_amount, parse_book_id, parse_date
from bookctl.domain.types import MAX_INT, OrderKey, parse_order_key
from bookctl.services.base import BaseService
from bookctl.services.result import ServiceResult, failure

if TYPE_CHECKING:
    import datetime as dt

    from bookctl.infrastructure.store import Store

logger = logging.getLogger(__name__)

MSG_INVALID_ID = "Please specify a valid --id flag."
MSG_INVALID_AMOUNT = "Restock amount must be a positive integer."
MSG_INVALID_DATE = "Invalid date format. Use yyyy-MM-dd."
MSG_NOT_FOUND = "Book not found."
MSG_OUT_OF_STOCK = "Book is out of stock."
MSG_EMPTY = "No books available to restock."
MSG_STOCK_LIMIT = "Restock would exceed the maximum stock count."


class InventoryService(BaseService):
    """Query and mutate the book inventory.

    Args:
        store: The Store to operate on.
        rng: Source of randomness for restock amounts and random book
            selection. Defaults to a fresh ``random.Random()``.
    """

    def __init__(self, store: Store, *, rng: random.Random | None = None) -> None:
        super().__init__(store)
        self._rng = rng or random.Random()

    # ------------------------------------------------------------------
    # list
    # ------------------------------------------------------------------

    def list_books(
        self,
        *,
        title: str | None = None,
        author: str | None = None,
        date: str | None = None,
        order_by: str | None = None,
    ) -> ServiceResult:
        """List books matching all supplied filters.

        Args:
            title: Case-insensitive substring of the title.
            author: Case-insensitive substring of the author.
            date: Exact publication date, ``yyyy-MM-dd``.
            order_by: One of title, author, date, count (case-insensitive).
        """
        op = "list_books"

        day: dt.date | None = None
        if date:
            try:
                day = parse_date(date)
            except ValueError:
                return failure(op, "INVALID_DATE", MSG_INVALID_DATE, date=date)

        order: OrderKey | None = None
        if order_by:
            try:
                order = parse_order_key(order_by)
            except ValueError as exc:
                return failure(
                    op,
                    "INVALID_ORDER",
                    str(exc),
                    order_by=order_by,
                    allowed=[k.value for k in OrderKey],
                )

        predicates = build_predicates(title=title, author=author, day=day)
        matched = sort_books(apply_filters(self._store.list_books(), predicates), order)
        logger.debug("list_books matched %d rows", len(matched))

        items = [b.to_item() for b in matched]
        return ServiceResult(ok=True, op=op, data={"items": items, "count": len(items)})

    # ------------------------------------------------------------------
    # buy
    # ------------------------------------------------------------------

    def purchase(self, book_id: str | int | None) -> ServiceResult:
        """Sell one copy of a book, refusing when it is out of stock."""
        op = "buy"

        if book_id is None:
            return failure(op, "INVALID_ID", MSG_INVALID_ID)
        try:
            bid = parse_book_id(book_id)
        except ValueError:
            return failure(op, "INVALID_ID", MSG_INVALID_ID, id=str(book_id))

        with self._store.transaction() as txn:
            book = txn.get_book(bid)
            if book is None:
                return failure(op, "NOT_FOUND", MSG_NOT_FOUND, id=bid)
            if book.count <= 0:
                return failure(op, "OUT_OF_STOCK", MSG_OUT_OF_STOCK, id=bid, count=book.count)
            new_count = book.count - 1
            txn.set_count(bid, new_count)

        logger.info("Bought book %d (%s), count %d -> %d", bid, book.title, book.count, new_count)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "id": bid,
                "title": book.title,
                "count": new_count,
                "message": f"Book '{book.title}' bought successfully.",
            },
        )

    # ------------------------------------------------------------------
    # restock
    # ------------------------------------------------------------------

    def restock(
        self,
        book_id: str | int | None = None,
        amount: str | int | None = None,
    ) -> ServiceResult:
        """Add stock to a book.

        * id and amount: add exactly *amount* (must be positive).
        * id only: add a random amount.
        * neither id: pick a book uniformly at random and add a random
          amount. An explicit *amount* is ignored with a warning.
        """
        op = "restock"
        warnings: list[str] = []

        bid: int | None = None
        if book_id is not None:
            try:
                bid = parse_book_id(book_id)
            except ValueError:
                return failure(op, "INVALID_ID", MSG_INVALID_ID, id=str(book_id))

        explicit: int | None = None
        if amount is not None:
            try:
                explicit = parse_amount(amount)
            except ValueError:
                return failure(op, "INVALID_AMOUNT", MSG_INVALID_AMOUNT, count=str(amount))
            if explicit <= 0:
                return failure(op, "INVALID_AMOUNT", MSG_INVALID_AMOUNT, count=explicit)

        with self._store.transaction() as txn:
            if bid is None:
                ids = txn.book_ids()
                if not ids:
                    return failure(op, "EMPTY_INVENTORY", MSG_EMPTY)
                bid = ids[self._rng.randrange(len(ids))]
                if explicit is not None:
                    warnings.append("--count is ignored when no --id is given")
                added = self._random_amount()
            else:
                added = explicit if explicit is not None else self._random_amount()

            book = txn.get_book(bid)
            if book is None:
                return failure(op, "NOT_FOUND", MSG_NOT_FOUND, id=bid)
            if book.count + added > MAX_INT:
                return failure(
                    op, "STOCK_LIMIT", MSG_STOCK_LIMIT, id=bid, count=book.count, added=added
                )
            new_count = book.count + added
            txn.set_count(bid, new_count)

        logger.info("Restocked book %d (%s) by %d, count now %d", bid, book.title, added, new_count)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "id": bid,
                "title": book.title,
                "count": new_count,
                "added": added,
                "message": f"Book '{book.title}' restocked successfully.",
            },
            warnings=warnings,
        )

    def _random_amount(self) -> int:
        cfg = self._store.settings.restock
        return self._rng.randrange(cfg.min_amount, cfg.max_amount)
