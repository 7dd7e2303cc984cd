"""Parsing of raw ``--flag=value`` strings into typed values.

Commands hand flag values through as strings so that malformed input is
reported by the service layer as a structured error, not a usage error.
Each parser raises ``ValueError`` on bad input.
"""

from __future__ import annotations

import re
from datetime import date, datetime

from bookctl.domain.types import DATE_FORMAT, MAX_INT

# ASCII digits with an optional sign; no underscores, no decimal point.
_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_book_id(raw: str | int) -> int:
    """Parse a book id. Must be a positive integer.

    Examples:
        >>> parse_book_id("7")
        7
        >>> parse_book_id(" 12 ")
        12
    """
    value = _parse_int(raw, "id")
    if value < 1:
        msg = f"Book id must be a positive integer, got {value}"
        raise ValueError(msg)
    return value


def parse_amount(raw: str | int) -> int:
    """Parse a restock amount. Sign is checked by the caller."""
    return _parse_int(raw, "count")


def parse_date(raw: str) -> date:
    """Parse a ``yyyy-MM-dd`` date string.

    Examples:
        >>> parse_date("2020-01-01")
        datetime.date(2020, 1, 1)
    """
    try:
        return datetime.strptime(raw.strip(), DATE_FORMAT).date()
    except ValueError:
        msg = f"Invalid date {raw!r}, expected yyyy-MM-dd"
        raise ValueError(msg) from None


def _parse_int(raw: str | int, name: str) -> int:
    if isinstance(raw, bool):
        msg = f"Invalid {name}: {raw!r}"
        raise ValueError(msg)
    if isinstance(raw, int):
        value = raw
    else:
        text = raw.strip()
        if _INT_RE.fullmatch(text) is None:
            msg = f"Invalid {name}: {raw!r}"
            raise ValueError(msg)
        value = int(text)
    if not -MAX_INT - 1 <= value <= MAX_INT:
        msg = f"{name} out of range: {raw!r}"
        raise ValueError(msg)
    return value
