"""Command: add stock to a book."""

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
  bookctl restock --id=2 --count=3
  bookctl restock --id=2
  bookctl restock""",
)
@click.option("--id", "book_id", default=None, metavar="INT", help="Book id (random if omitted).")
@click.option(
    "--count",
    "amount",
    default=None,
    metavar="INT",
    help="Copies to add (random 1-9 if omitted).",
)
@click.pass_obj
def restock(app: AppContext, book_id: str | None, amount: str | None) -> None:
    """Increase a book's stock."""
    app.emit(InventoryService(app.store).restock(book_id, amount))
