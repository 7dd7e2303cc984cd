"""Listing order keys and date format constants."""

from __future__ import annotations

from enum import StrEnum

DATE_FORMAT = "%Y-%m-%d"

# Ids, amounts and stock counts are 32-bit signed integers.
MAX_INT = 2**31 - 1


class OrderKey(StrEnum):
    """Fields a book listing can be ordered by (ascending)."""

    TITLE = "title"
    AUTHOR = "author"
    DATE = "date"
    COUNT = "count"


def parse_order_key(raw: str) -> OrderKey:
    """Match *raw* case-insensitively against :class:`OrderKey`.

    Raises:
        ValueError: If *raw* names no known order key.
    """
    try:
        return OrderKey(raw.strip().lower())
    except ValueError:
        msg = f"Invalid order-by field: {raw}"
        raise ValueError(msg) from None
