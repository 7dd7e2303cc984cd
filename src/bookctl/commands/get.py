"""Command: list books with optional filters and ordering."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bookctl.commands._base import BookCommand
from bookctl.services.inventory import InventoryService

if TYPE_CHECKING:
    from bookctl.commands._context import AppContext


@click.command(
    cls=BookCommand,
    examples="""\
  bookctl get
  bookctl get --title=book
  bookctl get --author="author 2" --order-by=count
  bookctl get --date=2020-01-01
  bookctl --json get --order-by=title""",
)
@click.option("--title", default=None, help="Title contains (case-insensitive).")
@click.option("--author", default=None, help="Author contains (case-insensitive).")
@click.option("--date", "date_str", default=None, help="Exact date (yyyy-MM-dd).")
@click.option(
    "--order-by",
    "order_by",
    default=None,
    metavar="[title|author|date|count]",
    help="Sort ascending by field.",
)
@click.pass_obj
def get(
    app: AppContext,
    title: str | None,
    author: str | None,
    date_str: str | None,
    order_by: str | None,
) -> None:
    """List books in the inventory."""
    result = InventoryService(app.store).list_books(
        title=title,
        author=author,
        date=date_str,
        order_by=order_by,
    )
    app.emit(result)
