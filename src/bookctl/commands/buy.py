"""Command: sell one copy of a book."""

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
  bookctl buy --id=1
  bookctl --json buy --id=2""",
)
@click.option("--id", "book_id", default=None, metavar="INT", help="Book id.")
@click.pass_obj
def buy(app: AppContext, book_id: str | None) -> None:
    """Decrement a book's stock by one."""
    app.emit(InventoryService(app.store).purchase(book_id))
