"""Book value model plus the listing pipeline: filter, then sort.

The listing is built in memory over the full candidate set rather than
composed as a SQL query:

    load all rows -> title filter -> author filter -> date filter -> sort

Filters are case-insensitive substring matches for title and author and
an exact date match for the publication date. Sorting is stable, so
books with equal keys keep their id order.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import date
from typing import Any

from pydantic import BaseModel, Field

from bookctl.domain.types import DATE_FORMAT, OrderKey


class Book(BaseModel):
    """One inventory row."""

    model_config = {"frozen": True}

    id: int
    title: str
    author: str
    year: date
    count: int = Field(ge=0)

    def to_item(self) -> dict[str, Any]:
        """Serializable dict used in ServiceResult payloads."""
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "year": self.year.strftime(DATE_FORMAT),
            "count": self.count,
        }


BookPredicate = Callable[[Book], bool]

_SORT_KEYS: dict[OrderKey, Callable[[Book], Any]] = {
    OrderKey.TITLE: lambda b: b.title,
    OrderKey.AUTHOR: lambda b: b.author,
    OrderKey.DATE: lambda b: b.year,
    OrderKey.COUNT: lambda b: b.count,
}


def title_contains(needle: str) -> BookPredicate:
    lowered = needle.casefold()
    return lambda book: lowered in book.title.casefold()


def author_contains(needle: str) -> BookPredicate:
    lowered = needle.casefold()
    return lambda book: lowered in book.author.casefold()


def published_on(day: date) -> BookPredicate:
    return lambda book: book.year == day


def build_predicates(
    *,
    title: str | None = None,
    author: str | None = None,
    day: date | None = None,
) -> list[BookPredicate]:
    """Return the active predicates in application order.

    Empty strings count as "not supplied".
    """
    predicates: list[BookPredicate] = []
    if title:
        predicates.append(title_contains(title))
    if author:
        predicates.append(author_contains(author))
    if day is not None:
        predicates.append(published_on(day))
    return predicates


def apply_filters(books: Iterable[Book], predicates: Iterable[BookPredicate]) -> list[Book]:
    """Apply each predicate in sequence; a book must satisfy all of them."""
    result = list(books)
    for predicate in predicates:
        result = [b for b in result if predicate(b)]
    return result


def sort_books(books: Iterable[Book], order_by: OrderKey | None) -> list[Book]:
    """Sort ascending by *order_by*, or keep input order when None."""
    if order_by is None:
        return list(books)
    return sorted(books, key=_SORT_KEYS[order_by])
